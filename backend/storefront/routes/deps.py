"""
Shared route dependencies
"""
from fastapi import Request

from storefront.models.form import FormState
from storefront.services.dashboard import Dashboard
from storefront.services.product_form import FormController


def get_dashboard(request: Request) -> Dashboard:
    """The process-wide dashboard created in the app lifespan."""
    return request.app.state.dashboard


def form_state(form: FormController) -> FormState:
    return FormState(
        draft=form.draft,
        preview=form.preview,
        submitting=form.submitting,
        can_submit=form.can_submit,
        error_message=form.error_message,
        success_message=form.success_message,
        validation_errors=[e.value for e in form.validation_errors()],
    )
