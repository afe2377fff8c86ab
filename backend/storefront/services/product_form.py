"""
State and workflow behind the "Add New Product" form.

The controller owns the draft, validates it locally and sends a single
create request per accepted submission. A created product is handed to
`on_created` (the dashboard wires this to ListSynchronizer.ingest).
"""
import logging
import math
from decimal import Decimal, InvalidOperation
from typing import Callable, List, Optional

from pydantic import ValidationError as SchemaError

from storefront.errors import FakeStoreError, ImageReadError, SubmissionError, ValidationError
from storefront.models.product import DRAFT_FIELDS, Draft, Product, Rating
from storefront.services.fakestore import FakeStoreClient
from storefront.services.images import encode_image
from storefront.services.observable import Observable

log = logging.getLogger("form")

SUCCESS_MESSAGE = "Product added successfully!"


def _is_positive_number(value: str) -> bool:
    try:
        number = Decimal(value.strip())
        # must also survive float(); "1e400" is a finite Decimal but an infinite float
        return number.is_finite() and number > 0 and math.isfinite(float(number))
    except (InvalidOperation, AttributeError):
        return False


def validation_errors(draft: Draft) -> List[ValidationError]:
    """Every rule the draft currently fails, in display order."""
    errors = []
    if not draft.title.strip():
        errors.append(ValidationError.TITLE)
    if not draft.price or not _is_positive_number(draft.price):
        errors.append(ValidationError.PRICE)
    if not draft.description.strip():
        errors.append(ValidationError.DESCRIPTION)
    if not draft.category.strip():
        errors.append(ValidationError.CATEGORY)
    if not draft.image:
        errors.append(ValidationError.IMAGE)
    return errors


def merge_created(echoed: dict, draft: Draft) -> Product:
    """
    Build the product to display from the create response.

    The demo API does not store what it receives, so locally entered values
    win over the echoed ones; the response only contributes `id` (and
    `rating` when it sends one).
    """
    record = dict(echoed)
    if record.get("rating") is not None:
        try:
            Rating.model_validate(record["rating"])
        except SchemaError:
            log.warning(f"Ignoring malformed rating in create response: {record['rating']!r}")
            del record["rating"]
    for name, value in draft.to_create().model_dump().items():
        if value not in ("", None):
            record[name] = value
    return Product.model_validate(record)


class FormController(Observable):
    """Sole writer of the draft and the form messages."""

    def __init__(self, client: FakeStoreClient, on_created: Optional[Callable[[Product], None]] = None):
        super().__init__()
        self._client = client
        self._on_created = on_created
        self.draft = Draft()
        self.submitting = False
        self.error_message = ""
        self.success_message = ""

    @property
    def preview(self) -> Optional[str]:
        return self.draft.image or None

    @property
    def can_submit(self) -> bool:
        return not self.submitting and not validation_errors(self.draft)

    def validation_errors(self) -> List[ValidationError]:
        return validation_errors(self.draft)

    def update_field(self, name: str, value) -> None:
        if name not in DRAFT_FIELDS:
            raise KeyError(f"Unknown form field: {name!r}")
        self.draft = self.draft.model_copy(update={name: "" if value is None else str(value)})
        self._notify()

    async def select_image(self, upload) -> None:
        """Encode the chosen file into the draft. No file chosen is a no-op."""
        if upload is None or not getattr(upload, "filename", None):
            return
        try:
            encoded = await encode_image(upload)
        except ImageReadError as e:
            log.warning(f"Image selection ignored: {e}")
            return
        self.draft = self.draft.model_copy(update={"image": encoded})
        log.info(f"Selected image {upload.filename!r} ({len(encoded)} chars encoded)")
        self._notify()

    def validate(self) -> bool:
        errors = self.validation_errors()
        if errors:
            self.error_message = errors[0].value
            self.success_message = ""
            return False
        self.error_message = ""
        return True

    async def _create(self, draft: Draft) -> Product:
        try:
            echoed = await self._client.create_product(draft.to_create())
            return merge_created(echoed, draft)
        except (FakeStoreError, ValueError) as e:
            raise SubmissionError() from e

    async def submit(self) -> Optional[Product]:
        """
        Validate and send the draft. Returns the created product, or None when
        the submission was skipped or failed (see `error_message`).
        """
        if self.submitting:
            log.info("Submit ignored: a submission is already in progress")
            return None
        if not self.validate():
            log.info(f"Submit blocked: {self.error_message}")
            self._notify()
            return None

        draft = self.draft
        self.submitting = True
        self.error_message = ""
        self.success_message = ""
        self._notify()

        product = None
        try:
            product = await self._create(draft)
        except SubmissionError as e:
            log.error(f"Create request failed: {e.__cause__}")
            self.error_message = str(e)
        else:
            if self._on_created is not None:
                self._on_created(product)
            self.draft = Draft()
            self.success_message = SUCCESS_MESSAGE
        finally:
            self.submitting = False
            self._notify()
        return product
