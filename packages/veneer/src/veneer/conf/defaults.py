"""Default configuration values for veneer."""

DEFAULTS: dict[str, object] = {
    # Naming conventions
    "DECORATOR_SUFFIX": "Decorator",
    "SOURCE_MODULES": ("models",),
    "DECORATOR_MODULES": ("decorators",),
    # Diagnostics
    "WARN_ON_REDECORATION": True,
    # Django integration
    "AUTODISCOVER": True,
    "HELPERS": None,
}
