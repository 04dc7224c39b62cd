"""PumpkinPower - light up pumpkins with redstone power"""

__version__ = "1.0.0"
__description__ = "Swap powered pumpkins for jack o' lanterns and back"

__all__ = ["PumpkinPower", "__version__"]


def __getattr__(name: str):
    """Lazy import so the core rule can be used without loading the plugin wiring."""
    if name == "PumpkinPower":
        from .main import PumpkinPower

        return PumpkinPower
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
