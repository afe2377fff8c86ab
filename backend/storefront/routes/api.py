"""
JSON API over the product form and the product list.
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from storefront.models.form import FieldUpdate, FormState, ProductList, SubmitResult
from storefront.routes.deps import form_state, get_dashboard
from storefront.services.dashboard import Dashboard
from storefront.services.presentation import present_product, present_products

router = APIRouter()


@router.get("/products", response_model=ProductList)
async def list_products(dashboard: Dashboard = Depends(get_dashboard)):
    """Rendered rows for every product, newest first"""
    products = dashboard.products.products
    return ProductList(
        loading=dashboard.products.loading,
        count=len(products),
        products=present_products(products),
    )


@router.get("/form", response_model=FormState)
async def get_form(dashboard: Dashboard = Depends(get_dashboard)):
    return form_state(dashboard.form)


@router.patch("/form", response_model=FormState)
async def update_form_field(update: FieldUpdate, dashboard: Dashboard = Depends(get_dashboard)):
    try:
        dashboard.form.update_field(update.name, update.value)
    except KeyError as e:
        raise HTTPException(status_code=422, detail=str(e.args[0]))
    return form_state(dashboard.form)


@router.post("/form/image", response_model=FormState)
async def select_form_image(
    image: Optional[UploadFile] = File(None),
    dashboard: Dashboard = Depends(get_dashboard),
):
    await dashboard.form.select_image(image)
    return form_state(dashboard.form)


@router.post("/form/submit", response_model=SubmitResult)
async def submit_form(dashboard: Dashboard = Depends(get_dashboard)):
    """Submit the current draft. Failures are reported in `form.error_message`."""
    product = await dashboard.form.submit()
    view = None
    if product is not None:
        # ingest prepends, so the new product sits at position 1
        view = present_product(product, 1)
    return SubmitResult(form=form_state(dashboard.form), product=view)
