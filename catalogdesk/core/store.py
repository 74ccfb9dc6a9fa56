"""Catalog state and the operations that keep it in sync with the remote collection.

``CatalogStore`` owns one ``CatalogState``: the product list as last reported
by the server, the "new product" draft, the optional "editing" draft, one
validation-error map per draft and a single ``last_error`` message.

Drafts are validated on submit only. A failed validation replaces that
draft's error map and never reaches the network. A failed remote call leaves
the list, the draft and its error map untouched and records ``last_error``.
The product list is only ever changed from a successful remote response.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from ..logging import product_to_loggable, products_to_loggable
from .canonical import PRODUCT_FIELDS, Draft, Product, ProductId, as_draft
from .remote import CatalogClient, RemoteError
from .validate import ValidationErrors, validate_product

logger = logging.getLogger(__name__)

OperationStatus = Literal["ok", "invalid", "remote_error", "busy"]
DraftSlot = Literal["new", "edit"]


@dataclass
class CatalogState:
    products: list[Product] = field(default_factory=list)
    new_draft: Draft = field(default_factory=Draft.empty)
    editing_draft: Draft | None = None
    new_errors: ValidationErrors = field(default_factory=dict)
    edit_errors: ValidationErrors = field(default_factory=dict)
    last_error: str | None = None


@dataclass(frozen=True)
class OperationResult:
    status: OperationStatus
    errors: ValidationErrors = field(default_factory=dict)
    message: str | None = None
    product: Product | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def _same_id(left: ProductId | None, right: ProductId | None) -> bool:
    if left is None or right is None:
        return False
    return left == right or str(left) == str(right)


def _check_fields(fields: dict[str, Any]) -> None:
    unknown = sorted(set(fields) - set(PRODUCT_FIELDS))
    if unknown:
        raise TypeError(f"Unknown draft field(s): {', '.join(unknown)}")


class CatalogStore:
    def __init__(self, client: CatalogClient, *, state: CatalogState | None = None):
        self.client = client
        self.state = state if state is not None else CatalogState()
        self._submitting: dict[DraftSlot, bool] = {"new": False, "edit": False}

    def is_submitting(self, slot: DraftSlot) -> bool:
        return self._submitting[slot]

    def _log_product(self, message: str, product: Product) -> None:
        summary = product_to_loggable(product)
        if summary is not None:
            logger.debug("%s:\n%s", message, json.dumps(summary, ensure_ascii=False, indent=2))

    def _failed(self, prefix: str, exc: RemoteError) -> OperationResult:
        message = f"{prefix}: {exc}"
        self.state.last_error = message
        logger.warning(message)
        return OperationResult(status="remote_error", message=message)

    def _busy(self, slot: DraftSlot) -> OperationResult:
        logger.debug("Ignoring submit for %s draft: a request is already in flight.", slot)
        return OperationResult(status="busy", message=f"The {slot} product is already being saved.")

    def load_all(self) -> OperationResult:
        try:
            products = self.client.list_products()
        except RemoteError as exc:
            return self._failed("Error fetching products", exc)

        self.state.products = list(products)
        self.state.last_error = None
        summaries = products_to_loggable(self.state.products)
        if summaries is None:
            logger.debug("Loaded %d product(s).", len(products))
        else:
            logger.debug("Loaded %d product(s):\n%s", len(products), json.dumps(summaries, ensure_ascii=False, indent=2))
        return OperationResult(status="ok")

    def update_new_draft(self, **fields: Any) -> Draft:
        """Change new-draft fields without validating them."""
        _check_fields(fields)
        self.state.new_draft = self.state.new_draft.copy(**fields)
        return self.state.new_draft

    def submit_new(self, draft: Draft | Product | Mapping[str, Any] | None = None) -> OperationResult:
        if self._submitting["new"]:
            return self._busy("new")
        if draft is not None:
            self.state.new_draft = as_draft(draft).copy(id=None)

        candidate = self.state.new_draft
        report = validate_product(candidate)
        if not report.valid:
            self.state.new_errors = report.errors
            return OperationResult(status="invalid", errors=report.errors)
        self.state.new_errors = {}

        self._submitting["new"] = True
        try:
            created = self.client.create_product(candidate.copy())
        except RemoteError as exc:
            return self._failed("Error adding product", exc)
        finally:
            self._submitting["new"] = False

        self.state.products = [*self.state.products, created]
        self.state.new_draft = Draft.empty()
        self.state.last_error = None
        self._log_product("Added product", created)
        return OperationResult(status="ok", product=created)

    def cancel_new(self) -> None:
        self.state.new_draft = Draft.empty()
        self.state.new_errors = {}

    def delete_one(self, product_id: ProductId) -> OperationResult:
        try:
            self.client.delete_product(product_id)
        except RemoteError as exc:
            return self._failed("Error deleting product", exc)

        self.state.products = [p for p in self.state.products if not _same_id(p.id, product_id)]
        self.state.last_error = None
        logger.debug("Deleted product %s.", product_id)
        return OperationResult(status="ok")

    def begin_edit(self, product: Product) -> Draft:
        self.state.editing_draft = Draft.from_product(product)
        self.state.edit_errors = {}
        return self.state.editing_draft

    def update_editing_draft(self, **fields: Any) -> Draft | None:
        """Change editing-draft fields without validating; no-op when nothing is being edited."""
        _check_fields(fields)
        if self.state.editing_draft is None:
            return None
        self.state.editing_draft = self.state.editing_draft.copy(**fields)
        return self.state.editing_draft

    def submit_edit(self, product_id: ProductId, draft: Draft | Product | Mapping[str, Any] | None = None) -> OperationResult:
        if self._submitting["edit"]:
            return self._busy("edit")
        if draft is not None:
            self.state.editing_draft = as_draft(draft)
        if self.state.editing_draft is None:
            return OperationResult(status="invalid", message="No product is being edited.")

        candidate = self.state.editing_draft
        report = validate_product(candidate)
        if not report.valid:
            self.state.edit_errors = report.errors
            return OperationResult(status="invalid", errors=report.errors)
        self.state.edit_errors = {}

        self._submitting["edit"] = True
        try:
            updated = self.client.update_product(product_id, candidate.copy(id=product_id))
        except RemoteError as exc:
            return self._failed("Error updating product", exc)
        finally:
            self._submitting["edit"] = False

        self.state.products = [updated if _same_id(p.id, product_id) else p for p in self.state.products]
        self.state.editing_draft = None
        self.state.last_error = None
        self._log_product("Updated product", updated)
        return OperationResult(status="ok", product=updated)

    def cancel_edit(self) -> None:
        self.state.editing_draft = None
        self.state.edit_errors = {}

    def dismiss_error(self) -> None:
        self.state.last_error = None


__all__ = ["CatalogState", "CatalogStore", "DraftSlot", "OperationResult", "OperationStatus"]
