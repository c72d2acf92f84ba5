"""Section catalog: one entry per concrete section variant, tagged for matching."""

from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SectionRole(str, Enum):
    NAVBAR = "navbar"
    HERO = "hero"
    FEATURES = "features"
    GALLERY = "gallery"
    LOGOS = "logos"
    PRICING = "pricing"
    TESTIMONIALS = "testimonials"
    FOOTER = "footer"


class CatalogEntry(BaseModel):
    """One section variant."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    block_type: str = Field(..., alias="blockType", description="Element type to create")
    role: SectionRole
    variant: str
    label: str
    layout: str | None = None
    tags: tuple[str, ...] = ()
    is_default: bool = Field(default=False, alias="isDefault")


def _entry(block_type: str, role: str, variant: str, label: str, layout: str,
           tags: list[str], default: bool = False) -> CatalogEntry:
    return CatalogEntry(
        block_type=block_type,
        role=SectionRole(role),
        variant=variant,
        label=label,
        layout=layout,
        tags=tuple(tags),
        is_default=default,
    )


DEFAULT_CATALOG: tuple[CatalogEntry, ...] = (
    # Navbar
    _entry("NavbarBlock", "navbar", "navbar8", "Standard", "standard",
           ["navbar", "nav", "standard", "links", "cta", "button", "logo"], default=True),
    _entry("NavbarBlock", "navbar", "navbar1", "Logo + Auth", "standard",
           ["navbar", "nav", "auth", "login", "signup", "logo"]),
    _entry("NavbarBlock", "navbar", "navbar7", "Centered", "centered",
           ["navbar", "nav", "centered", "center", "compact", "minimal"]),
    _entry("NavbarBlock", "navbar", "navbar9", "Mega Menu", "mega",
           ["navbar", "nav", "mega", "mega-menu", "icons", "large", "dropdown"]),
    _entry("NavbarBlock", "navbar", "navbar10", "Mega Alt", "mega",
           ["navbar", "nav", "mega", "alternate", "dropdown", "extended"]),
    _entry("NavbarBlock", "navbar", "navbar11", "Floating Dock", "floating",
           ["navbar", "nav", "floating", "dock", "fixed", "sticky"]),
    # Hero
    _entry("HeroBlock", "hero", "hero83", "Dual CTA", "centered",
           ["hero", "centered", "dual-cta", "cta", "buttons", "badge", "announcement"], default=True),
    _entry("HeroBlock", "hero", "hero10", "Badge + Logos", "centered",
           ["hero", "centered", "badge", "logos", "trusted", "social-proof"]),
    _entry("HeroBlock", "hero", "hero11", "Image + Border", "centered",
           ["hero", "centered", "image", "border", "screenshot", "product"]),
    _entry("HeroBlock", "hero", "hero18", "Centered Grid", "centered",
           ["hero", "centered", "grid", "image-grid", "gallery", "screenshots"]),
    _entry("HeroBlock", "hero", "hero111", "Email Capture", "centered",
           ["hero", "centered", "email", "email-capture", "form", "waitlist", "signup", "newsletter"]),
    _entry("HeroBlock", "hero", "hero112", "Split", "split",
           ["hero", "split", "left-right", "two-column", "stats", "metrics"]),
    _entry("HeroBlock", "hero", "hero197", "Dot Pattern", "centered",
           ["hero", "centered", "dot-pattern", "background-pattern", "form", "badge"]),
    # Features
    _entry("FeatureBlock", "features", "feature42", "Values Grid", "grid",
           ["features", "grid", "3-col", "values", "cards", "benefits"], default=True),
    _entry("FeatureBlock", "features", "feature1", "Split Image", "split",
           ["features", "split", "image", "left-right", "benefits", "checklist"]),
    _entry("FeatureBlock", "features", "feature6", "Checklist", "split",
           ["features", "split", "checklist", "checks", "list", "bullets"]),
    _entry("FeatureBlock", "features", "feature44", "Integration Cards", "grid",
           ["features", "grid", "integrations", "cards", "partners", "apps", "logos"]),
    _entry("FeatureBlock", "features", "feature62", "Alternating Rows", "alternating",
           ["features", "alternating", "rows", "image", "split", "details"]),
    _entry("FeatureBlock", "features", "feature70", "Tabs Carousel", "tabs",
           ["features", "tabs", "carousel", "interactive", "tabbed"]),
    _entry("FeatureBlock", "features", "feature102", "Steps", "numbered",
           ["features", "steps", "numbered", "how-it-works", "process", "onboarding"]),
    _entry("FeatureBlock", "features", "feature118", "Bento Grid", "bento",
           ["features", "bento", "grid", "masonry", "tiles", "mixed-sizes"]),
    _entry("FeatureBlock", "features", "feature148", "Template Grid", "grid",
           ["features", "grid", "templates", "cta", "browse", "gallery"]),
    _entry("FeatureBlock", "features", "feature227", "Split + Icons", "split",
           ["features", "split", "icons", "icon-list", "list"]),
    _entry("FeatureBlock", "features", "feature276", "Hover Grid", "grid",
           ["features", "grid", "hover", "interactive", "icons"]),
    # Gallery
    _entry("GalleryBlock", "gallery", "gallery4", "Carousel", "carousel",
           ["gallery", "carousel", "arrows", "slides", "case-studies"], default=True),
    _entry("GalleryBlock", "gallery", "gallery6", "Card Grid", "grid",
           ["gallery", "grid", "cards", "cta", "portfolio", "projects"]),
    _entry("GalleryBlock", "gallery", "gallery7", "Masonry Tabs", "masonry",
           ["gallery", "masonry", "tabs", "filter", "images"]),
    _entry("GalleryBlock", "gallery", "gallery9", "Full Carousel", "carousel",
           ["gallery", "carousel", "full-width", "dots", "fullscreen"]),
    _entry("GalleryBlock", "gallery", "gallery25", "Masonry Grid", "masonry",
           ["gallery", "masonry", "multi-column", "images", "photos"]),
    # Logos
    _entry("LogosBlock", "logos", "logos3", "Heading + Grid", "grid",
           ["logos", "trusted", "social-proof", "heading", "companies", "brands"], default=True),
    _entry("LogosBlock", "logos", "logos1", "Simple Grid", "grid",
           ["logos", "grid", "simple", "companies", "brands", "clients"]),
    _entry("LogosBlock", "logos", "logos7", "Scrolling Marquee", "marquee",
           ["logos", "marquee", "scroll", "scrolling", "animated", "infinite"]),
    # Pricing
    _entry("PricingBlock", "pricing", "pricing4", "Cards", "cards",
           ["pricing", "cards", "side-by-side", "toggle", "plans", "tiers"], default=True),
    _entry("PricingBlock", "pricing", "pricing16", "Tabs", "tabs",
           ["pricing", "tabs", "tab-style", "3-col", "columns", "plans"]),
    _entry("PricingBlock", "pricing", "pricing34", "Toggle", "toggle",
           ["pricing", "toggle", "badge", "features", "comparison"]),
    # Testimonials
    _entry("TestimonialBlock", "testimonials", "testimonial1", "Cards Grid", "grid",
           ["testimonials", "quotes", "reviews", "cards", "grid", "avatars", "customer"], default=True),
    _entry("TestimonialBlock", "testimonials", "testimonial4", "Large Quote", "single",
           ["testimonials", "quote", "large", "single", "image", "featured"]),
    _entry("TestimonialBlock", "testimonials", "testimonial7", "Dual Carousel", "carousel",
           ["testimonials", "carousel", "dual", "scrolling", "animated", "auto-scroll"]),
    # Footer
    _entry("FooterBlock", "footer", "footer2", "Multi-column", "multi-column",
           ["footer", "multi-column", "links", "logo", "bar", "legal", "columns"], default=True),
    _entry("FooterBlock", "footer", "footer3", "Social + Links", "simple",
           ["footer", "social", "links", "icons", "simple", "minimal"]),
    _entry("FooterBlock", "footer", "footer5", "Simple 4-col", "multi-column",
           ["footer", "4-col", "simple", "columns", "links"]),
    _entry("FooterBlock", "footer", "footer50", "CTA + Nav", "cta",
           ["footer", "cta", "banner", "nav", "social", "legal", "call-to-action"]),
)


def entries_for_role(role: SectionRole | str, catalog: Sequence[CatalogEntry] = DEFAULT_CATALOG) -> list[CatalogEntry]:
    """All entries for a role, in catalog order."""
    role = SectionRole(role)
    return [entry for entry in catalog if entry.role is role]


def default_entry(role: SectionRole | str, catalog: Sequence[CatalogEntry] = DEFAULT_CATALOG) -> CatalogEntry | None:
    """The role's designated default, else its first entry, else None."""
    candidates = entries_for_role(role, catalog)
    for entry in candidates:
        if entry.is_default:
            return entry
    return candidates[0] if candidates else None
