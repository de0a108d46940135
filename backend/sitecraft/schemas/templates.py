from pydantic import ConfigDict

from sitecraft.schemas.generation import CamelModel


class TemplateOption(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    image_url: str
    image_hint: str
