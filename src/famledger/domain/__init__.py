"""Domain layer for famledger application."""

# Services pull in the database layer, so they are imported lazily to keep
# `famledger.domain.entities` and `famledger.domain.errors` cheap to import.
_SERVICES = {
    "TransactionService": "famledger.domain.transaction",
    "SummaryService": "famledger.domain.summary",
    "InsightService": "famledger.domain.insights",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
