"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Upload:
    """A binary payload submitted with a product form.

    A zero-size upload is what a browser sends for an untouched file
    input, so ``is_empty`` means "nothing was submitted".
    """

    filename: str
    content_type: str
    data: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    @property
    def is_image(self) -> bool:
        return self.content_type.startswith("image/")


@dataclass(frozen=True)
class SessionUser:
    """The signed-in user as seen by the application layer."""

    user_id: str
