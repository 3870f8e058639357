from pydantic import BaseModel

class UploadResult(BaseModel):
    url: str
    message: str = "File uploaded successfully"
