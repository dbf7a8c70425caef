class Category:
    """Shadows `tests.app.models.Category`, the top level namespace is searched first."""
