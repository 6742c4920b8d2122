from setuptools import setup


setup(name='uwm',
      version='1.0',
      description='Unknown word signatures and smoothed unseen-word scores for lexicalized parsers',
      packages=['uwm', 'uwm.lexicon', 'uwm.parsing', 'uwm.signatures', 'uwm.test'],
      python_requires='>=3.6',
      install_requires=[
          'path',
          'nltk>=3.0',
          'numpy',
          'pandas',
          'arsenal',
      ],
      extras_require={
          'test': ['pytest'],
      },
      entry_points={
          'console_scripts': [
              'uwm=uwm.__main__:main',
          ],
      })
