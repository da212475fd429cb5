"""Page capture: load a URL in headless Chromium and read its styles."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from design_copier.errors import CaptureError

logger = logging.getLogger(__name__)

# With a selector: the element's computed style plus its inline style.
# Without: the cssText of every readable stylesheet rule.
EXTRACT_STYLES_JS = """
(selector) => {
  const extractStyles = (element) => {
    const styles = [];
    const computed = window.getComputedStyle(element);
    const lines = [];
    for (let i = 0; i < computed.length; i++) {
      const prop = computed[i];
      lines.push(`${prop}: ${computed.getPropertyValue(prop)};`);
    }
    styles.push(lines.join("\\n"));
    if (element.hasAttribute("style")) {
      styles.push(element.getAttribute("style") || "");
    }
    return styles.join("\\n");
  };

  if (selector) {
    const element = document.querySelector(selector);
    return element ? extractStyles(element) : "";
  }

  const cssRules = [];
  for (const sheet of Array.from(document.styleSheets)) {
    try {
      for (const rule of Array.from(sheet.cssRules)) {
        cssRules.push(rule.cssText);
      }
    } catch (e) {
      // cross-origin stylesheet
    }
  }
  return cssRules.join("\\n");
}
"""


@dataclass(frozen=True)
class CapturedPage:
    html: str
    styles: str

    def to_dict(self) -> dict[str, str]:
        return {"styles": self.styles, "html": self.html}


def capture_page(
    url: str,
    selector: str | None = None,
    *,
    timeout_ms: int = 30_000,
    wait_until: str = "networkidle",
) -> CapturedPage:
    """Load *url* and return its markup and styles.

    The browser is closed on every exit path. Playwright failures are raised
    as :class:`CaptureError`.
    """
    logger.info("Capturing %s (selector=%s)", url, selector or "-")
    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=True)
            try:
                page = browser.new_page()
                page.goto(url, wait_until=wait_until, timeout=timeout_ms)
                styles = page.evaluate(EXTRACT_STYLES_JS, selector)
                html = page.content()
            finally:
                browser.close()
    except PlaywrightError as exc:
        raise CaptureError(f"Failed to capture styles: {exc}", cause=exc) from exc

    logger.info("Captured %d bytes of HTML and %d bytes of CSS", len(html), len(styles or ""))
    return CapturedPage(html=html, styles=styles or "")
