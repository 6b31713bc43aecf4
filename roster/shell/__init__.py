"""Interactive console shell wrapping a ``SortedRegistry``."""
