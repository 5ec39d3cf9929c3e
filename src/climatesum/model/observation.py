from pydantic import BaseModel


class Observation(BaseModel):
  region: str
  timestamp: int
  humidity: float
  snow: float
  cloud_cover: float
  lightning: float
  pressure: float
  temperature: float
