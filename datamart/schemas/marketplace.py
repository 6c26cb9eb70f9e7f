"""Marketplace Schemas - payload and response models for DataItems and Purchasers.

Invariants:
    - Payload integers are strict unsigned 64-bit ints (0 .. 2**64 - 1): booleans
      and numeric strings are rejected, never coerced
    - Zero price is left to the domain validator so it is reported alongside
      empty text fields
    - Unknown payload keys (id, seller, owner, ...) are ignored, never applied
    - Responses serialize with camelCase aliases; both names accepted on input
"""

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict, Field

from datamart.core.domain_types import NAT64_MAX
from datamart.core.records import DataItem, Purchaser


class DataItemPayload(BaseModel):
    """Fields a seller supplies when listing or updating a DataItem."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str
    description: str
    price: int = Field(strict=True, ge=0, le=NAT64_MAX)
    attachment_url: str = Field(alias="attachmentURL")
    data_format: str = Field(alias="dataFormat")
    status: str
    quality: str
    rating: int = Field(strict=True, ge=0, le=NAT64_MAX)


class PurchaserPayload(BaseModel):
    """Fields a buyer supplies when registering or updating a profile."""
    model_config = ConfigDict(extra="ignore")

    name: str
    price: int = Field(strict=True, ge=0, le=NAT64_MAX)
    message: str


class DataItemResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str
    price: int
    seller: str
    attachment_url: str = Field(alias="attachmentURL")
    data_format: str = Field(alias="dataFormat")
    status: str
    quality: str
    rating: int

    @classmethod
    def from_record(cls, record: DataItem) -> "DataItemResponse":
        return cls(**asdict(record))


class PurchaserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    owner: str
    name: str
    price: int
    message: str
    purchased_item: list[str] = Field(alias="purchasedItem")

    @classmethod
    def from_record(cls, record: Purchaser) -> "PurchaserResponse":
        return cls(**asdict(record))


class DeletedResponse(BaseModel):
    """Id of the record that was removed."""
    id: str


class MessageResponse(BaseModel):
    message: str
