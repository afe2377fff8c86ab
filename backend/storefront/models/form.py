"""
Request/response models for the form and product JSON endpoints
"""
from pydantic import BaseModel
from typing import List, Optional

from storefront.models.product import Draft
from storefront.services.presentation import ProductView


class FieldUpdate(BaseModel):
    """Body of PATCH /api/form"""
    name: str
    value: str = ""


class FormState(BaseModel):
    draft: Draft
    preview: Optional[str] = None
    submitting: bool
    can_submit: bool
    error_message: str = ""
    success_message: str = ""
    validation_errors: List[str] = []


class SubmitResult(BaseModel):
    form: FormState
    product: Optional[ProductView] = None


class ProductList(BaseModel):
    loading: bool
    count: int
    products: List[ProductView]
