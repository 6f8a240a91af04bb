"""
Request models for every forwarded eTIMS operation.

Required string fields must be non-empty, numeric fields must be numbers,
and unknown fields are dropped before the payload is forwarded.
"""

import math
import re
from typing import Annotated, Any, Dict, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, StringConstraints
from pydantic import ValidationError as PydanticValidationError

from shared.errors import ValidationError

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]

_INTEGER_TEXT = re.compile(r"[+-]?\d+")


def _parse_number_text(text: str) -> Union[int, float]:
    if _INTEGER_TEXT.fullmatch(text):
        return int(text)
    try:
        return float(text)
    except ValueError:
        raise ValueError("Input should be a number") from None


def _finite_number(value: Any) -> Union[int, float]:
    """Accept finite ints and floats (or numeric text); reject bools."""
    if isinstance(value, bool):
        raise ValueError("Input should be a number")
    if isinstance(value, str):
        value = _parse_number_text(value.strip())
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError("Input should be a finite number")
        # whole numbers go back out as integers
        return int(value) if value.is_integer() else value
    raise ValueError("Input should be a number")


Number = Annotated[Union[int, float], PlainValidator(_finite_number)]


class RequestModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class AuthRequest(RequestModel):
    username: NonEmptyStr
    password: NonEmptyStr


class InitializationRequest(RequestModel):
    tin: NonEmptyStr = Field(description="Taxpayer Identification Number")
    bhfId: NonEmptyStr = Field(description="Branch ID")
    dvcSrlNo: NonEmptyStr = Field(description="Device Serial Number")


class BranchQuery(RequestModel):
    """Taxpayer-scoped lookup since a given request date."""

    tin: NonEmptyStr
    bhfId: NonEmptyStr
    lastReqDt: NonEmptyStr = Field(description="Last Request Date in format YYYYMMDDHHMMSS")


class BhfListRequest(RequestModel):
    lastReqDt: NonEmptyStr


class SalesTrnsItem(RequestModel):
    itemCd: NonEmptyStr = Field(description="Item Code")
    itemNm: NonEmptyStr = Field(description="Item Name")
    qty: Number = Field(description="Quantity")
    prc: Number = Field(description="Price")
    splyAmt: Number = Field(description="Supply Amount")
    dcRt: Optional[Number] = Field(default=None, description="Discount Rate")
    dcAmt: Optional[Number] = Field(default=None, description="Discount Amount")
    taxTyCd: NonEmptyStr = Field(description="Tax Type Code")
    taxAmt: Number = Field(description="Tax Amount")


class SalesTrnsRequest(RequestModel):
    tin: NonEmptyStr
    bhfId: NonEmptyStr
    invcNo: NonEmptyStr = Field(description="Invoice Number")
    salesTrnsItems: List[SalesTrnsItem]


class SelectSalesTrnsRequest(BranchQuery):
    invcNo: Optional[NonEmptyStr] = Field(default=None, description="Invoice Number")


class StockMasterRequest(RequestModel):
    tin: NonEmptyStr
    bhfId: NonEmptyStr
    itemCd: NonEmptyStr
    itemClsCd: NonEmptyStr
    itemNm: NonEmptyStr
    pkgUnitCd: NonEmptyStr
    qtyUnitCd: NonEmptyStr
    splyAmt: Number
    vatTyCd: NonEmptyStr


class SaveItemRequest(RequestModel):
    tin: NonEmptyStr
    bhfId: NonEmptyStr
    itemCd: NonEmptyStr
    itemClsCd: NonEmptyStr
    itemTyCd: NonEmptyStr = Field(description="Item Type Code")
    itemNm: NonEmptyStr
    orgnNatCd: NonEmptyStr = Field(description="Origin Nation Code")
    pkgUnitCd: NonEmptyStr
    qtyUnitCd: NonEmptyStr
    taxTyCd: NonEmptyStr
    dftPrc: Number = Field(description="Default Unit Price")
    useYn: NonEmptyStr = Field(description="Used / Unused (Y/N)")
    itemStdNm: Optional[str] = None
    btchNo: Optional[str] = None
    bcd: Optional[str] = Field(default=None, description="Barcode")
    isrcAplcbYn: Optional[str] = Field(default=None, description="Insurance Applicable (Y/N)")
    sftyQty: Optional[Number] = Field(default=None, description="Safety Quantity")
    addInfo: Optional[str] = None
    regrId: Optional[str] = None
    regrNm: Optional[str] = None
    modrId: Optional[str] = None
    modrNm: Optional[str] = None


SCHEMAS: Dict[str, Type[RequestModel]] = {
    "auth": AuthRequest,
    "initialization": InitializationRequest,
    "code_list": BranchQuery,
    "item_cls_list": BranchQuery,
    "bhf_list": BhfListRequest,
    "notice_list": BranchQuery,
    "taxpayer_info": BranchQuery,
    "customer_list": BranchQuery,
    "save_item": SaveItemRequest,
    "sales_trns": SalesTrnsRequest,
    "select_sales_trns": SelectSalesTrnsRequest,
    "move_list": BranchQuery,
    "stock_master": StockMasterRequest,
    "purchase_trns": BranchQuery,
    "import_item_list": BranchQuery,
}


def _field_path(loc) -> str:
    return ".".join(str(part) for part in loc)


def validate(data: Any, schema: Union[str, Type[RequestModel]]) -> Dict[str, Any]:
    """Validate ``data`` against ``schema`` and return the cleaned payload.

    All failures are collected, not just the first one.
    """
    if isinstance(schema, str):
        schema = SCHEMAS[schema]

    try:
        model = schema.model_validate(data)
    except PydanticValidationError as exc:
        errors = [
            {"field": _field_path(err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        raise ValidationError("Validation failed", errors) from None

    return model.model_dump(exclude_none=True, warnings=False)
