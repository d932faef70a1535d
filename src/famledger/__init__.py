"""Famledger - family finance tracker."""

__version__ = "0.1.0"


# The CLI imports every command module, so load it only when asked for
def __getattr__(name):
    if name == "main":
        from famledger.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
