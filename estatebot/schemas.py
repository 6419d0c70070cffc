from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from .data.base import PropertyDetails, UserRecord

class PropertyDetailsIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    location: str = ""
    # Positivity is checked by the estimator so it surfaces as InvalidInput
    square_footage: float | None = Field(default=None, alias="squareFootage")
    bedrooms: int | None = Field(default=None, ge=0)
    bathrooms: int | None = Field(default=None, ge=0)
    year_built: int | None = Field(default=None, alias="yearBuilt")
    additional_features: str | None = Field(default=None, alias="additionalFeatures")

    def to_details(self) -> PropertyDetails:
        return PropertyDetails(
            location=self.location,
            square_footage=self.square_footage,
            bedrooms=self.bedrooms,
            bathrooms=self.bathrooms,
            year_built=self.year_built,
            additional_features=self.additional_features,
        )

class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str | None = None
    property_details: PropertyDetailsIn | None = Field(default=None, alias="propertyDetails")

class ChatResponse(BaseModel):
    reply: str
    prediction: int | None = None

class ChatTurnOut(BaseModel):
    text: str
    sender: str
    timestamp: datetime

class HistoryResponse(BaseModel):
    messages: list[ChatTurnOut]

class ValuationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    valuation: int
    formatted: str
    currency: str = "INR"
    price_per_sqft: int = Field(alias="pricePerSqft")
    city: str | None = None

class SignupRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None

class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None

class UserOut(BaseModel):
    id: str
    name: str
    email: str
    role: str

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserOut":
        return cls(id=user.id, name=user.name, email=user.email, role=user.role)

class AuthResponse(BaseModel):
    message: str | None = None
    user: UserOut
