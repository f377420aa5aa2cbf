from pydantic import BaseModel, Field, ConfigDict


class SettingsBase(BaseModel):
    """Store identity, receipt text and tax options."""
    app: str = Field("Standalone Point of Sale", max_length=255)
    store: str = Field("", max_length=255)
    address_one: str = Field("", max_length=255)
    address_two: str = Field("", max_length=255)
    contact: str = Field("", max_length=255)
    tax: str = Field("", max_length=64, description="Tax registration number")
    symbol: str = Field("$", max_length=8, description="Currency symbol")
    percentage: str = Field("0", max_length=16, description="Tax percentage")
    charge_tax: bool = False
    footer: str = ""
    img: str = Field("", max_length=255, description="Logo path")


class SettingsSave(SettingsBase):
    pass


class SettingsResponse(SettingsBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
