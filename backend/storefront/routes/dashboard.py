"""
Server-rendered dashboard: the "Add New Product" form plus table and card views.
"""
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, UploadFile, File
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from storefront.routes.deps import get_dashboard
from storefront.services.dashboard import Dashboard
from storefront.services.presentation import present_products

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


async def _apply_form(dashboard: Dashboard, fields: dict, image: Optional[UploadFile]):
    for name, value in fields.items():
        dashboard.form.update_field(name, value)
    await dashboard.form.select_image(image)


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def dashboard_page(request: Request, dashboard: Dashboard = Depends(get_dashboard)):
    form = dashboard.form
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "title": "Products",
            "form": form,
            "draft": form.draft,
            "loading": dashboard.products.loading,
            "products": present_products(dashboard.products.products),
        },
    )


@router.post("/form", include_in_schema=False)
async def save_draft(
    title: str = Form(""),
    price: str = Form(""),
    description: str = Form(""),
    category: str = Form(""),
    image: Optional[UploadFile] = File(None),
    dashboard: Dashboard = Depends(get_dashboard),
):
    await _apply_form(
        dashboard,
        {"title": title, "price": price, "description": description, "category": category},
        image,
    )
    return RedirectResponse(url="/", status_code=303)


@router.post("/form/submit", include_in_schema=False)
async def submit_draft(
    title: str = Form(""),
    price: str = Form(""),
    description: str = Form(""),
    category: str = Form(""),
    image: Optional[UploadFile] = File(None),
    dashboard: Dashboard = Depends(get_dashboard),
):
    await _apply_form(
        dashboard,
        {"title": title, "price": price, "description": description, "category": category},
        image,
    )
    await dashboard.form.submit()
    return RedirectResponse(url="/", status_code=303)
