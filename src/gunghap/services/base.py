"""BaseService — shared foundation for gunghap services.

Every service receives the resolved settings and a phonetic decomposer.
The decomposer defaults to :class:`HangulDecomposer` so callers only
inject one in tests or for a different script variant.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gunghap.infrastructure.hangul import HangulDecomposer

if TYPE_CHECKING:
    from gunghap.config.settings import GunghapSettings
    from gunghap.domain.decomposer import PhoneticDecomposer


class BaseService:
    """Base for service-layer classes.

    Usage::

        class DestinyService(BaseService):
            def compute(self, name1: str, name2: str) -> ServiceResult:
                ...
    """

    def __init__(
        self,
        settings: GunghapSettings,
        decomposer: PhoneticDecomposer | None = None,
    ) -> None:
        self._settings = settings
        self._decomposer = decomposer or HangulDecomposer()
