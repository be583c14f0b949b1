from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status

from api.dependencies import get_app_settings, get_dollar_price_service, get_hypotenuse_service
from api.schemas import DollarPriceResponse, HypotenuseRequest
from application.services import DollarPriceService, HypotenuseService
from config.settings import Settings

router = APIRouter(prefix='/api', tags=['functions'])


@router.get(
	'/DollarPrice',
	response_model=DollarPriceResponse | None,
	status_code=status.HTTP_200_OK,
	summary='Current USD price of a currency',
)
async def dollar_price(
	service: Annotated[DollarPriceService, Depends(get_dollar_price_service)],
	currency: Annotated[str | None, Query()] = None,
) -> DollarPriceResponse | None:
	result = await service.get_price(currency)
	if result is None:
		return None
	return DollarPriceResponse.from_domain(result)


@router.post(
	'/Hypotenuse',
	response_model=float,
	status_code=status.HTTP_200_OK,
	summary='Hypotenuse of a right triangle',
	openapi_extra={
		'requestBody': {
			'content': {'application/json': {'schema': HypotenuseRequest.model_json_schema()}},
			'required': True,
		}
	},
)
async def hypotenuse(
	request: Request,
	service: Annotated[HypotenuseService, Depends(get_hypotenuse_service)],
) -> float:
	body = await request.body()
	return service.compute_from_body(body)


@router.api_route(
	'/Test',
	methods=['GET', 'POST'],
	response_model=str,
	summary='Echo the configured rate API base URL',
)
async def settings_test(settings: Annotated[Settings, Depends(get_app_settings)]) -> str:
	return f'Setting: {settings.CURRENCYLAYER_BASE_URL}'
