from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

# Defaults for the NFA_SIMULATOR settings dict
DEFAULTS = {
    'EPSILON': 'e',
    'STRICT_START': False,
}


def get_setting(key: str) -> Any:
    """
    Look up a simulator setting.

    Values come from the NFA_SIMULATOR dict in the Django settings, falling back
    to DEFAULTS. Outside a configured Django project the defaults are used.

    Args:
        key: One of the keys of DEFAULTS

    Returns:
        The configured value
    """
    if key not in DEFAULTS:
        raise KeyError(f"Unknown NFA_SIMULATOR setting: {key}")

    try:
        # First access loads DJANGO_SETTINGS_MODULE
        user_settings = getattr(settings, 'NFA_SIMULATOR', None) or {}
    except ImproperlyConfigured:
        return DEFAULTS[key]

    if not isinstance(user_settings, dict):
        raise ImproperlyConfigured('NFA_SIMULATOR must be a dictionary')

    return user_settings.get(key, DEFAULTS[key])


def is_symbol(value: Any) -> bool:
    """Whether value can be used as an input symbol or epsilon marker (one character)."""
    return isinstance(value, str) and len(value) == 1


def get_epsilon() -> str:
    epsilon = get_setting('EPSILON')
    if not is_symbol(epsilon):
        raise ImproperlyConfigured(
            f"NFA_SIMULATOR['EPSILON'] must be a single character, got {epsilon!r}"
        )
    return epsilon


def strict_start() -> bool:
    return bool(get_setting('STRICT_START'))
