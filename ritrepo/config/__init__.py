"""Configuration package.

Note: settings are built from the environment when
``ritrepo.config.settings`` is imported; import it directly where needed so
tests can reload it under a patched environment.
"""

__all__: list[str] = []
