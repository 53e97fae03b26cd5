"""
Two-panel encrypt/decrypt flow, without any widgets.

Keeps what the screen would show: the encrypt panel, the decrypt panel
(which receives the ciphertext and key after each encryption) and the
result currently visualised. All cipher work is delegated to the engine.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from .cipher import Direction, TransformResult, transform
from .keys import KeyCheck, validate_key
from .mapping import MappingEntry, mapping_for


@dataclass
class Panel:
    text: str = ""
    key: str = ""
    output: str = ""
    check: Optional[KeyCheck] = None

    def set_key(self, raw_key) -> KeyCheck:
        self.key = str(raw_key)
        self.check = validate_key(raw_key)
        return self.check

    @property
    def can_run(self) -> bool:
        return self.check is not None and self.check.ok


@dataclass
class Session:
    encrypt_panel: Panel = field(default_factory=Panel)
    decrypt_panel: Panel = field(default_factory=Panel)
    last_result: Optional[TransformResult] = None
    last_mapping: List[MappingEntry] = field(default_factory=list)

    def _run(self, panel: Panel, direction: Direction) -> Optional[TransformResult]:
        if not panel.can_run:
            panel.output = ""
            return None
        result = transform(panel.text, panel.check.key, direction)
        panel.output = result.output
        self.last_result = result
        self.last_mapping = mapping_for(result)
        return result

    def encrypt(self, text: str, raw_key) -> Optional[TransformResult]:
        """
        Encrypt and hand the ciphertext and key over to the decrypt panel.
        Returns None if the key is invalid; the encrypt panel then holds the
        rejected input with an empty output and the decrypt panel is untouched.
        """
        self.encrypt_panel.text = text
        self.encrypt_panel.set_key(raw_key)
        result = self._run(self.encrypt_panel, Direction.ENCRYPT)
        if result is not None:
            self.decrypt_panel.text = result.output
            self.decrypt_panel.set_key(result.key)
            self.decrypt_panel.output = ""
        return result

    def decrypt(self, text: Optional[str] = None, raw_key=None) -> Optional[TransformResult]:
        """Decrypt the decrypt panel; arguments override what was transferred."""
        if text is not None:
            self.decrypt_panel.text = text
        if raw_key is not None:
            self.decrypt_panel.set_key(raw_key)
        return self._run(self.decrypt_panel, Direction.DECRYPT)

    def round_trip_ok(self) -> bool:
        return self.encrypt_panel.text == self.decrypt_panel.output
