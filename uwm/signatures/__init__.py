from uwm.signatures.pipeline import BASE_LABEL
from uwm.signatures.generator import SignatureGenerator, LANGUAGES, level_range
