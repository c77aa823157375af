from pydantic import BaseModel
from typing import Literal

class UpdateConfigSuccess(BaseModel):
    status: Literal["success"] = "success"

class UpdateConfigError(BaseModel):
    status: Literal["error"] = "error"
    message: str = "Invalid JSON"
