"""
Base class for emoji registry components.

Version: 1.0.0
"""

from typing import Dict, List


class ComponentEmoji:
    """
    Base class for component-specific emoji collections.

    Class attributes define emojis as constants; no instance methods needed.

    Example:
        >>> class MyEmoji(ComponentEmoji):
        ...     HELLO = "👋"
    """

    @classmethod
    def get_all(cls) -> Dict[str, str]:
        """
        Get all emoji definitions from this category.

        Returns:
            Dictionary mapping emoji name to emoji character
        """
        result: Dict[str, str] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if name.isupper() and isinstance(value, str):
                    result[name] = value
        return result

    @classmethod
    def list_names(cls) -> List[str]:
        """Get sorted list of all emoji names in this category."""
        return sorted(cls.get_all())
