import os
import re

from dotenv import load_dotenv, find_dotenv
from unidecode import unidecode

dotenv_path = find_dotenv(usecwd=True)
load_dotenv(dotenv_path)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

FLAGS_DIR = os.getenv('FLAGS_DIR', os.path.join(BASE_DIR, 'flag_assets'))
DEFAULT_PNG_WIDTH = int(os.getenv('DEFAULT_PNG_WIDTH', 100))

LOG_DIR = os.path.expanduser(os.getenv('LOG_DIR', '~/logs'))
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

_NON_WORD = re.compile(r'[^a-z0-9]+')


def fold_text(text):
    """Lowercase ASCII form of a label, used for case and accent insensitive matching."""
    return ' '.join(unidecode(text).lower().split())


def slugify(*parts):
    """
    Build a long code from one or more labels.
    Args:
        parts (str): Labels to join, e.g. ("United States", "California").
    Returns:
        str: Lowercase, underscore separated identifier, e.g. "united_states_california".
    """
    words = []
    for part in parts:
        slug = _NON_WORD.sub('_', unidecode(part).lower()).strip('_')
        if slug:
            words.append(slug)
    return '_'.join(words)
