"""
Page request normalization and the page descriptor.

A ``PageRequest`` is always sane: zero-based page >= 0 and a size within
(0, max_page_size].  ``Page`` is the envelope every listing returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from contract_kernel.domain.policy import DEFAULT_POLICY, ContractPolicy

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class PageRequest:
    """Normalized zero-based page coordinates."""

    page: int
    size: int

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def of(
        cls,
        page: int | None = None,
        size: int | None = None,
        policy: ContractPolicy = DEFAULT_POLICY,
    ) -> "PageRequest":
        """
        Build a request from raw caller input.

        Missing or negative page becomes 0.  Missing or non-positive size
        becomes the policy default; oversized requests are clamped to
        ``policy.max_page_size``.
        """
        page = page if page is not None and page >= 0 else 0
        if size is None or size <= 0:
            size = policy.default_page_size
        size = min(size, policy.max_page_size)
        return cls(page=page, size=size)


@dataclass(frozen=True)
class Page(Generic[T]):
    """Paged-result envelope: one slice of items plus pagination metadata."""

    content: tuple[T, ...]
    page: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.total_elements == 0:
            return 0
        return -(-self.total_elements // self.size)

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    @classmethod
    def build(
        cls, items: list[T], request: PageRequest, total_elements: int
    ) -> "Page[T]":
        return cls(
            content=tuple(items),
            page=request.page,
            size=request.size,
            total_elements=total_elements,
        )

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        """Return a page with ``fn`` applied to each item, metadata unchanged."""
        return Page(
            content=tuple(fn(item) for item in self.content),
            page=self.page,
            size=self.size,
            total_elements=self.total_elements,
        )
