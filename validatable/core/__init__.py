from validatable.core.interfaces import Attributable

__all__ = ["Attributable"]
