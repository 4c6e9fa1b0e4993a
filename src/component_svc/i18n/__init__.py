"""Component display-string bundles."""

from .merger import LocaleBundle, LocaleMerger

__all__ = ["LocaleBundle", "LocaleMerger"]
