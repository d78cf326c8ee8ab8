"""In-page scripts evaluated by the Playwright adapter.

Selectors and values are passed as evaluation arguments. Only page
globals named by the PageContract are spliced into source text, and
those are validated identifiers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitecheck.domain.model.page_contract import PageContract

_DELAY = "const delay = (ms) => new Promise((resolve) => setTimeout(resolve, ms));"

LAYOUT = """
(sel) => {
  const nav = document.querySelector(sel.nav);
  const mock = document.querySelector(sel.mock);
  let mockState = { found: false, display: "", width: 0, height: 0 };
  if (mock) {
    const container = mock.closest(sel.mockContainer);
    const rect = mock.getBoundingClientRect();
    mockState = {
      found: true,
      display: container ? getComputedStyle(container).display : "",
      width: rect.width,
      height: rect.height,
    };
  }
  const footer = document.querySelector(sel.footer);
  if (footer) footer.scrollIntoView();
  return {
    scrollWidth: document.body.scrollWidth,
    innerWidth: window.innerWidth,
    navHeight: nav ? nav.getBoundingClientRect().height : null,
    mock: mockState,
    footerHeight: footer ? footer.getBoundingClientRect().height : null,
  };
}
"""

SCROLL_THROUGH = f"""
async ([step, pause]) => {{
  {_DELAY}
  for (let y = 0; y < document.body.scrollHeight; y += step) {{
    window.scrollTo(0, y);
    await delay(pause);
  }}
  window.scrollTo(0, 0);
}}
"""

BROKEN_IMAGES = """
() => Array.from(document.querySelectorAll("img"))
  .filter((img) => img.src && !img.src.startsWith("data:"))
  .filter((img) => !img.complete || img.naturalWidth === 0)
  .map((img) => img.getAttribute("src") || img.src)
"""

DOCUMENT_LANG = "() => document.documentElement.lang"

HEADING_STATE = """
(selector) => {
  const heading = document.querySelector(selector);
  return {
    lang: document.documentElement.lang,
    heading: heading ? heading.textContent.trim().substring(0, 30) : null,
  };
}
"""

ACCORDION = f"""
async ([button, item, answer, settle]) => {{
  {_DELAY}
  const toggle = document.querySelector(button);
  if (!toggle) return false;
  toggle.click();
  await delay(settle);
  const panel = toggle.closest(item)?.querySelector(answer);
  return panel ? panel.offsetHeight > 0 || getComputedStyle(panel).maxHeight !== "0px" : false;
}}
"""

CLICK_TAB = f"""
async ([selector, index, settle]) => {{
  {_DELAY}
  const tabs = document.querySelectorAll(selector);
  if (tabs.length <= index) return false;
  tabs[index].click();
  await delay(settle);
  return true;
}}
"""

FILL_INPUT = """
([selector, value]) => {
  const input = document.querySelector(selector);
  if (!input) return null;
  input.value = value;
  return input.value;
}
"""

JUMP_TO_ANCHOR = f"""
async ([targetId, settle]) => {{
  {_DELAY}
  const link = Array.from(document.querySelectorAll("a[href]"))
    .find((a) => a.getAttribute("href") === "#" + targetId);
  if (!link) return null;
  link.click();
  await delay(settle);
  const target = document.getElementById(targetId);
  return target ? target.getBoundingClientRect().top : null;
}}
"""

RESOURCE_WEIGHT = """
() => {
  const entries = performance.getEntriesByType("resource");
  let total = 0;
  for (const entry of entries) {
    if (entry.transferSize) total += entry.transferSize;
  }
  return { count: entries.length, totalKb: Math.round(total / 1024) };
}
"""


def switch_language(contract: PageContract) -> str:
    """Call the language switch with one code argument."""
    return f"(code) => {{ {contract.switch_language}(code); }}"


def toggle_languages(contract: PageContract) -> str:
    """Alternate two codes, collecting anything the switch throws."""
    fn = contract.switch_language
    return f"""
async ([first, second, cycles, pause]) => {{
  {_DELAY}
  const errors = [];
  try {{
    for (let i = 0; i < cycles; i++) {{
      {fn}(first);
      await delay(pause);
      {fn}(second);
      await delay(pause);
    }}
  }} catch (e) {{
    errors.push(String(e && e.message ? e.message : e));
  }}
  return errors;
}}
"""


def animation_state(contract: PageContract) -> str:
    """Rendered messages and timer bookkeeping.

    Top-level let bindings are not window properties, hence typeof on
    the bare identifier.
    """
    handle = contract.timeout_handle
    tracking = contract.tracking_collection
    return f"""
(containerId) => {{
  const container = document.getElementById(containerId);
  return {{
    messageCount: container ? container.children.length : 0,
    timeoutSet: typeof {handle} !== "undefined" && {handle} !== null,
    trackingPresent: typeof {tracking} !== "undefined",
  }};
}}
"""


def restart_animation(contract: PageContract) -> str:
    """Restart the animation, settle, count rendered messages."""
    return f"""
async ([containerId, settle]) => {{
  {_DELAY}
  {contract.restart_animation}();
  await delay(settle);
  const container = document.getElementById(containerId);
  return container ? container.children.length : 0;
}}
"""
