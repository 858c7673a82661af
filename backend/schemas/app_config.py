from pydantic import BaseModel

class AppConfigUpdate(BaseModel):
    value: str

class AppConfigOut(BaseModel):
    id: int
    name: str
    value: str

    class Config:
        from_attributes = True
