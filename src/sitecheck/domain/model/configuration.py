"""Check profile configuration.

Every fixed enumeration and business threshold the check groups use lives
here, so a different page or release profile is a configuration change,
not a code change. Defaults describe the current Zen landing page revision.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sitecheck.domain.model.page_contract import PageContract
from sitecheck.domain.model.target import PageRoute, Viewport


def _require_positive(name: str, value: int) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value}")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


# =============================================================================
# Structural validator
# =============================================================================


@dataclass(frozen=True, slots=True)
class MetaExpectations:
    """Expected head metadata.

    Attributes:
        charset: Exact encoding declaration
        viewport_contains: Required substring of the viewport meta
        min_title_length: Minimum <title> length
        min_description_length: Minimum meta description length
        min_og_title_length: Minimum og:title length
        min_og_description_length: Minimum og:description length
        og_type: Exact og:type
        og_locale: Exact og:locale
        min_og_image_length: Minimum og:image length
        lang: Exact <html lang> locale tag
    """

    charset: str = "UTF-8"
    viewport_contains: str = "width=device-width"
    min_title_length: int = 10
    min_description_length: int = 50
    min_og_title_length: int = 5
    min_og_description_length: int = 20
    og_type: str = "website"
    og_locale: str = "pt_BR"
    min_og_image_length: int = 1
    lang: str = "pt-BR"


@dataclass(frozen=True, slots=True)
class RequiredSection:
    """Landmark element that must be present.

    Attributes:
        name: Fact name (e.g. "comoFunciona")
        selector: CSS selector locating it
    """

    name: str
    selector: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.selector:
            raise ValueError("selector must not be empty")


@dataclass(frozen=True, slots=True)
class ContentMinimum:
    """Minimum count of a repeating structural unit.

    Attributes:
        name: Fact name (e.g. "faqItems")
        selector: CSS selector counting the units
        minimum: Required minimum count
        message: Expectation shown on violation
    """

    name: str
    selector: str
    minimum: int
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.selector:
            raise ValueError("selector must not be empty")
        _require_non_negative("minimum", self.minimum)


@dataclass(frozen=True, slots=True)
class CardLayout:
    """Parts every repeating card must contain.

    Attributes:
        selector: Card element selector
        label_selector: Small caps label inside a card
        title_selector: Card title
        body_selector: Card body paragraphs (excluding the label)
        tag_selector: Tag chips
        min_tags: Minimum number of tag chips
    """

    selector: str = ".sobre-card"
    label_selector: str = ".tracking-widest"
    title_selector: str = "h4"
    body_selector: str = "p:not(.tracking-widest)"
    tag_selector: str = ".flex-wrap span"
    min_tags: int = 3


@dataclass(frozen=True, slots=True)
class ConversationVariant:
    """Language variant of the scripted chat data.

    Attributes:
        name: Variant label (e.g. "PT")
        variable: Name of the array assigned in the inline script
        expected_count: Exact number of conversations
    """

    name: str
    variable: str
    expected_count: int = 4

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.variable:
            raise ValueError("variable must not be empty")
        _require_non_negative("expected_count", self.expected_count)


@dataclass(frozen=True, slots=True)
class RequiredText:
    """Labeled literal that must occur somewhere.

    Attributes:
        label: Check label
        text: Literal to look for
    """

    label: str
    text: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.label:
            raise ValueError("label must not be empty")
        if not self.text:
            raise ValueError("text must not be empty")


_DEFAULT_SECTIONS = (
    RequiredSection("hero", "#hero"),
    RequiredSection("sobre", "#sobre"),
    RequiredSection("comoFunciona", "#como-funciona"),
    RequiredSection("faq", "#faq"),
    RequiredSection("posicionamento", "#posicionamento"),
    RequiredSection("bottomCta", "#bottom-cta"),
    RequiredSection("footer", "footer"),
)

_DEFAULT_CONTENT = (
    ContentMinimum("agentCards", ".sobre-card", 10, "Expected at least 10 agent cards"),
    ContentMinimum("agentTabs", ".sobre-tab", 10, "Expected at least 10 agent tabs"),
    ContentMinimum("faqItems", "#faq .faq-item", 5, "Expected at least 5 FAQ items"),
    ContentMinimum("howItWorksSteps", "#como-funciona h3", 3, "Expected at least 3 steps"),
    ContentMinimum("forms", "form", 2, "Expected at least 2 forms (hero + bottom CTA)"),
)

_DEFAULT_PARTNER_LOGOS = (
    "Nubank",
    "Itaú",
    "Bradesco",
    "Santander",
    "Inter",
    "C6 Bank",
    "Mercado Pago",
    "BTG Pactual",
    "Caixa",
    "PicPay",
    "Neon",
    "Banco do Brasil",
)

_DEFAULT_TRANSLATION_KEYS = (
    "enSelectors",
    "enCards",
    "enTabs",
    "enFaq",
    "enSteps",
    "enHow",
    "enCta",
    "enFooter",
    "enForm",
    "enConsent",
    "enLegalLinks",
    "enLegalDisclaimer",
    "chatDataEN",
    "illustrationMap",
)

_DEFAULT_FUNCTIONS = (
    "initI18n",
    "switchLang",
    "translateIllustrations",
    "restartChat",
    "trackTimeout",
)

_DEFAULT_LEGAL_LINKS = (
    RequiredText("Privacy policy link exists", "privacidade"),
    RequiredText("Data retention PDF linked", "politica-retencao-dados"),
    RequiredText("Incident reporting PDF linked", "politica-reporte-incidentes"),
)

_DEFAULT_FOOTER_TEXTS = (
    RequiredText("CNPJ present in footer", "63.740.359/0001-15"),
    RequiredText("Company name in footer", "AIZEN TECNOLOGIA"),
    RequiredText("Correspondente Bancário disclosure", "Correspondente Bancário"),
)

_DEFAULT_BODY_TEXTS = (RequiredText("Form consent text present", "concorda em receber mensagens"),)

_DEFAULT_ORIGINS = (
    "cdn.tailwindcss.com",
    "fonts.googleapis.com",
    "cdnjs.cloudflare.com/ajax/libs/gsap",
    "unpkg.com/lucide",
    "iconify",
    "lenis",
)


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Structural validator profile.

    Attributes:
        document: Default document path, relative to the working directory
        meta: Head metadata expectations
        favicon_selector: Selector for the favicon link
        sections: Landmarks that must exist
        content_minimums: Minimum counts of repeating units
        partner_logos: Alt texts identifying partner logos
        min_partner_logos: Minimum partner logo count
        cards: Per-card completeness layout
        translation_keys: Identifiers the inline script must mention
        function_names: Functions the inline script must declare
        tracking_identifiers: Timer bookkeeping identifiers that must exist
        default_lang_variable: Variable holding the initial language
        default_lang_value: Value it must be initialized to
        forbidden_storage_key: localStorage key that must never be read
        conversations: Chat data variants and their expected counts
        conversation_marker: Regex marking one conversation object
        legal_links: Href fragments of required legal links
        footer_texts: Literals the footer must contain
        body_texts: Literals the visible body must contain
        deprecated_names: Product names that must not appear (any case)
        marker_tokens: Comment markers reported as warnings
        discouraged_character: Punctuation reported as a warning
        placeholder_phone: Placeholder number reported as a warning
        required_origins: Third-party origins that must be referenced
    """

    document: str = "index.html"
    meta: MetaExpectations = field(default_factory=MetaExpectations)
    favicon_selector: str = 'link[rel="icon"]'
    sections: tuple[RequiredSection, ...] = _DEFAULT_SECTIONS
    content_minimums: tuple[ContentMinimum, ...] = _DEFAULT_CONTENT
    partner_logos: tuple[str, ...] = _DEFAULT_PARTNER_LOGOS
    min_partner_logos: int = 10
    cards: CardLayout = field(default_factory=CardLayout)
    translation_keys: tuple[str, ...] = _DEFAULT_TRANSLATION_KEYS
    function_names: tuple[str, ...] = _DEFAULT_FUNCTIONS
    tracking_identifiers: tuple[str, ...] = ("chatAnimationTimeouts",)
    default_lang_variable: str = "currentLang"
    default_lang_value: str = "pt"
    forbidden_storage_key: str = "zenLang"
    conversations: tuple[ConversationVariant, ...] = (
        ConversationVariant("PT", "chatData"),
        ConversationVariant("EN", "chatDataEN"),
    )
    conversation_marker: str = r"\{\s*messages:"
    legal_links: tuple[RequiredText, ...] = _DEFAULT_LEGAL_LINKS
    footer_texts: tuple[RequiredText, ...] = _DEFAULT_FOOTER_TEXTS
    body_texts: tuple[RequiredText, ...] = _DEFAULT_BODY_TEXTS
    deprecated_names: tuple[str, ...] = ("aleah",)
    marker_tokens: tuple[str, ...] = ("TODO", "FIXME", "HACK", "XXX")
    discouraged_character: str = "—"
    placeholder_phone: str = "5511999999999"
    required_origins: tuple[str, ...] = _DEFAULT_ORIGINS

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.document:
            raise ValueError("document must not be empty")
        _require_non_negative("min_partner_logos", self.min_partner_logos)
        if not self.default_lang_variable:
            raise ValueError("default_lang_variable must not be empty")
        if not self.conversation_marker:
            raise ValueError("conversation_marker must not be empty")
        names = [s.name for s in self.sections] + [c.name for c in self.content_minimums]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate fact names: {', '.join(duplicates)}")


# =============================================================================
# Behavioral prober
# =============================================================================


@dataclass(frozen=True, slots=True)
class LanguageExpectation:
    """Expected page state after switching to a language.

    Attributes:
        name: Display name (e.g. "English")
        code: Code passed to the switch function
        lang: Expected document language attribute
        heading_fragment: Substring the designated heading must contain
    """

    name: str
    code: str
    lang: str
    heading_fragment: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for attr in ("name", "code", "lang", "heading_fragment"):
            if not getattr(self, attr):
                raise ValueError(f"{attr} must not be empty")


@dataclass(frozen=True, slots=True)
class PageSelectors:
    """CSS selectors the prober queries in the live page.

    Attributes:
        heading: Heading whose text follows the language
        nav: Primary navigation landmark
        mock: Illustrative phone mockup
        mock_container: Closest layout container of the mockup
        footer: Page footer
        accordion_button: First FAQ toggle
        accordion_item: FAQ item wrapping button and answer
        accordion_answer: Answer panel inside an item
        tab: Agent tab controls
        phone_input: Phone number field
        anchor_target_id: Id of the same-page anchor target
    """

    heading: str = "#hero h1"
    nav: str = "nav"
    mock: str = ".phone-frame"
    mock_container: str = 'div[class*="order-2"]'
    footer: str = "footer"
    accordion_button: str = "#faq .faq-item button"
    accordion_item: str = ".faq-item"
    accordion_answer: str = '.faq-answer, [class*="faq-answer"]'
    tab: str = ".sobre-tab"
    phone_input: str = '#hero-form input[type="tel"]'
    anchor_target_id: str = "sobre"


_DEFAULT_VIEWPORTS = (
    Viewport("Mobile (iPhone 14)", 390, 844),
    Viewport("Tablet (iPad)", 768, 1024),
    Viewport("Desktop", 1280, 800),
    Viewport("Wide Desktop", 1920, 1080),
)

_DEFAULT_ROUTES = (
    PageRoute("Home", "/"),
    PageRoute("Privacy Policy", "/privacidade/"),
    PageRoute("Privacy PDF", "/legal/politica-privacidade.html"),
)

_DEFAULT_LANGUAGES = (
    LanguageExpectation("English", "en", "en", "Your financial"),
    LanguageExpectation("Portuguese", "pt", "pt-BR", "Sua vida"),
)


@dataclass(frozen=True, slots=True)
class ProberConfig:
    """Behavioral prober profile.

    Durations are milliseconds.

    Attributes:
        base_url: Site root when no URL is given on the command line
        viewports: Layout passes, one per viewport
        routes: Load passes, one per route
        default_viewport: Viewport for non-layout groups
        navigation_timeout_ms: Bound on each navigation
        performance_timeout_ms: Bound on the performance load
        default_lang: Expected initial document language
        languages: Two languages toggled in turn
        switch_settle_ms: Wait after a language switch
        toggle_cycles: Rapid toggle cycles in the stress test
        toggle_pause_ms: Pause between toggles
        scroll_step_px: Scroll increment for lazy loading
        scroll_pause_ms: Pause after each scroll step
        lazy_settle_ms: Wait after the full scroll
        animation_settle_ms: Wait before inspecting the chat animation
        restart_settle_ms: Wait after restarting it
        accordion_settle_ms: Wait after clicking the accordion
        tab_settle_ms: Wait after clicking a tab
        anchor_settle_ms: Wait after clicking the anchor link
        anchor_max_top_px: Max distance of the target from viewport top
        phone_sample: Value typed into the phone input
        load_pass_ms: Load latency below this passes
        load_fail_ms: Load latency at or above this fails
        weight_warn_kb: Transfer size at or above this warns
        selectors: Live page selectors
        contract: Page globals the prober relies on
    """

    base_url: str = "http://localhost:8765"
    viewports: tuple[Viewport, ...] = _DEFAULT_VIEWPORTS
    routes: tuple[PageRoute, ...] = _DEFAULT_ROUTES
    default_viewport: Viewport = field(default_factory=lambda: Viewport("Desktop", 1280, 800))
    navigation_timeout_ms: int = 15000
    performance_timeout_ms: int = 30000
    default_lang: str = "pt-BR"
    languages: tuple[LanguageExpectation, ...] = _DEFAULT_LANGUAGES
    switch_settle_ms: int = 500
    toggle_cycles: int = 10
    toggle_pause_ms: int = 100
    scroll_step_px: int = 300
    scroll_pause_ms: int = 100
    lazy_settle_ms: int = 2000
    animation_settle_ms: int = 3000
    restart_settle_ms: int = 2100
    accordion_settle_ms: int = 500
    tab_settle_ms: int = 300
    anchor_settle_ms: int = 1000
    anchor_max_top_px: int = 200
    phone_sample: str = "11999999999"
    load_pass_ms: int = 3000
    load_fail_ms: int = 5000
    weight_warn_kb: int = 5000
    selectors: PageSelectors = field(default_factory=PageSelectors)
    contract: PageContract = field(default_factory=PageContract)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.routes:
            raise ValueError("routes must not be empty")
        if self.routes[0].path != "/":
            raise ValueError(f"first route must be the home route '/', got {self.routes[0].path!r}")
        if len(self.languages) != 2:
            raise ValueError(f"languages must hold exactly 2 entries, got {len(self.languages)}")
        _require_positive("navigation_timeout_ms", self.navigation_timeout_ms)
        _require_positive("performance_timeout_ms", self.performance_timeout_ms)
        _require_positive("scroll_step_px", self.scroll_step_px)
        _require_non_negative("toggle_cycles", self.toggle_cycles)
        if self.load_fail_ms < self.load_pass_ms:
            raise ValueError(
                f"load_fail_ms ({self.load_fail_ms}) must be >= load_pass_ms ({self.load_pass_ms})"
            )

    @property
    def home(self) -> PageRoute:
        """Route every single-page group runs against."""
        return self.routes[0]
