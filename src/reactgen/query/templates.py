"""Built-in component generation templates addressable with ``@``."""

from __future__ import annotations

TEMPLATE_CATALOG: tuple[str, ...] = (
    # forms
    "form:login",
    "form:signup",
    "form:contact",
    "form:search",
    # buttons
    "button:primary",
    "button:secondary",
    "button:ghost",
    # cards
    "card:simple",
    "card:product",
    "card:user",
    # modals
    "modal:confirm",
    "modal:info",
    "modal:form",
    # navigation
    "nav:header",
    "nav:sidebar",
    "nav:breadcrumbs",
)


def family_variants(family: str, templates: tuple[str, ...] = TEMPLATE_CATALOG) -> list[str]:
    """Return catalog entries whose family is ``family``, in catalog order."""
    return [
        template
        for template in templates
        if ":" in template and template_family(template) == family
    ]


def is_known_template(name: str, templates: tuple[str, ...] = TEMPLATE_CATALOG) -> bool:
    """Return True when name (without ``@``) is a catalog entry or a bare family."""
    if name in templates:
        return True
    return ":" not in name and bool(family_variants(name, templates))


def template_family(name: str) -> str:
    """Return the part of a template name before its first ``:``."""
    return name.split(":", 1)[0]
