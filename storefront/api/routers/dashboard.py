# storefront/api/routers/dashboard.py
from fastapi import APIRouter, Depends

from storefront.data.context import StoreContext, get_context
from storefront.domain.schemas import DashboardOut
from storefront.services.employee_service import EmployeeFacade

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardOut)
def get_dashboard(ctx: StoreContext = Depends(get_context)):
    return EmployeeFacade(ctx).get_dashboard_data()
