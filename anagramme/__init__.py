import logging

from .dictionary import Dictionary as Dictionary
from .dictionary import DictionaryError as DictionaryError
from .fragment import Fragment as Fragment
from .results import ResultSet as ResultSet
from .solver import Solver as Solver

logging.basicConfig(
    format="[%(asctime)s] %(message)s",
    level=logging.WARNING,
)
logging.captureWarnings(capture=True)
logger = logging.getLogger(__name__)
