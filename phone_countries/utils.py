import logging
from typing import Iterable, List

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def normalize_iso_code(iso_code: str) -> str:
    """Strip and upper-case an ISO code coming from user input"""
    return (iso_code or "").strip().upper()


def normalize_iso_codes(iso_codes: Iterable[str]) -> List[str]:
    """Normalize a list of ISO codes, dropping blanks"""
    return [code for code in (normalize_iso_code(c) for c in iso_codes) if code]
