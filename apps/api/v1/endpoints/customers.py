"""Customer endpoints for REST API."""

from fastapi import APIRouter, Depends, HTTPException

from ecommerce.application.dtos.customer_dto import CreateCustomerRequest, CustomerDTO
from ecommerce.application.services.customer_service import CustomerService
from ecommerce.application.use_cases.create_customer import CreateCustomerUseCase
from ecommerce.domain.value_objects import CustomerId

from apps.api.deps import get_create_customer_use_case, get_customer_service

router = APIRouter(prefix="/customers", tags=["customers"])


@router.post("", status_code=201)
async def create_customer(
    request: CreateCustomerRequest,
    use_case: CreateCustomerUseCase = Depends(get_create_customer_use_case),
) -> dict[str, str]:
    """Register a customer. Invalid email → 400."""
    customer_id = await use_case.execute(request)
    return {"id": str(customer_id)}


@router.get("/{customer_id}", response_model=CustomerDTO)
async def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerDTO:
    """Get customer by ID."""
    try:
        parsed_id = CustomerId.from_string(customer_id)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Customer {customer_id} not found")

    customer = await service.get_customer(parsed_id)
    if not customer:
        raise HTTPException(status_code=404, detail=f"Customer {customer_id} not found")
    return customer
