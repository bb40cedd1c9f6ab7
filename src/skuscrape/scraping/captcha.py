from ..config.settings import CAPTCHA_SELECTOR
from ..utils.logging import get_logger

logger = get_logger(__name__)


def is_captcha(page, selector: str = CAPTCHA_SELECTOR) -> bool:
    """True when the blocking-page marker is on ``page``.

    A lookup that fails counts as no CAPTCHA, so extraction still gets a try.
    """
    try:
        return page.query_selector(selector) is not None
    except Exception as exc:
        logger.debug("CAPTCHA check %r failed: %s", selector, exc)
        return False
