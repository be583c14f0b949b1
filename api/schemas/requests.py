from pydantic import BaseModel, ConfigDict, Field


class HypotenuseRequest(BaseModel):
	x: float = Field(..., description='First leg length')
	y: float = Field(..., description='Second leg length')

	model_config = ConfigDict(json_schema_extra={'example': {'x': 3, 'y': 4}})
