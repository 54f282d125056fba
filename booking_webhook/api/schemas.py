from pydantic import BaseModel


class FulfillmentResponseSchema(BaseModel):
    fulfillmentText: str
