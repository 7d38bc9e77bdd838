"""
ui_loader.py
------------
Loads screen layouts from YAML files and instantiates their elements.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List

from skyline.core.debug.debug_logger import DebugLogger

# Element type registry
ELEMENT_REGISTRY = {}

UI_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config" / "ui"


def register_element(type_name: str):
    """Decorator to register element types."""

    def decorator(cls):
        ELEMENT_REGISTRY[type_name] = cls
        return cls

    return decorator


class UILoader:
    """Loads and parses screen configurations from YAML files."""

    def __init__(self, anchor_resolver, base_path=None):
        """
        Initialize loader.

        Args:
            anchor_resolver: AnchorResolver used to place elements
            base_path: Directory holding the YAML layouts
        """
        self.anchor_resolver = anchor_resolver
        self.base_path = Path(base_path) if base_path else UI_CONFIG_DIR
        self.cache: Dict[str, Dict] = {}

    def load(self, filename: str) -> List[Any]:
        """
        Load a screen and return its elements in declaration order.

        Args:
            filename: Path relative to the ui config dir, e.g. "screens/main_menu.yaml"

        Raises:
            FileNotFoundError: If the layout file does not exist
            ValueError: If the layout has no root mapping
        """
        if filename not in self.cache:
            full_path = self.base_path / filename
            if not full_path.exists():
                raise FileNotFoundError(f"ui config not found: {full_path}")

            with open(full_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)

            if not isinstance(config, dict) or not config:
                raise ValueError(f"ui config is empty or malformed: {full_path}")

            self.cache[filename] = config
            DebugLogger.system(f"Loaded {filename}", category="loading")

        return self.load_from_dict(self.cache[filename])

    def load_from_dict(self, config: Dict[str, Any]) -> List[Any]:
        """Instantiate elements from an already parsed config."""
        # Root element with name (e.g., "main_menu: ...")
        if len(config) == 1 and 'elements' not in config:
            config = next(iter(config.values()))

        return [self._instantiate(element_config) for element_config in config.get('elements', [])]

    def _instantiate(self, element_config: Dict[str, Any]):
        element_class = self._get_element_class(element_config.get('type', 'button'))

        position = element_config.get('position', {})
        rect = self.anchor_resolver.resolve(
            position.get('anchor', 'top_left'),
            position.get('offset', [0, 0]),
            position.get('size', [100, 50]),
        )
        return element_class(element_config, rect)

    def _get_element_class(self, element_type: str):
        """Resolve element classes via lazy import."""
        if element_type in ELEMENT_REGISTRY:
            return ELEMENT_REGISTRY[element_type]

        if element_type == "button":
            from skyline.ui.elements.button import UIButton
            return UIButton

        raise ValueError(f"Unknown ui element type: {element_type}")
