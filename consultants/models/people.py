# consultants/models/people.py

from typing import Any, Dict, List

from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator


class Project(BaseModel):
    name: Any = None
    short_description: Any = Field(default=None, alias="shortDescription")
    background_image: Any = Field(default=None, alias="backgroundImage")
    link: Any = None

    class Config:
        populate_by_name = True
        extra = "allow"


class Person(BaseModel):
    # Values are taken as they come; nothing here rejects a record
    name: Any = None
    short_intro: Any = Field(default=None, alias="shortIntro")
    profile_picture: Any = Field(default=None, alias="profilePicture")
    projects: Any = None

    _key_order: List[str] = PrivateAttr(default_factory=list)

    class Config:
        populate_by_name = True
        extra = "allow"

    @field_validator("projects")
    @classmethod
    def wrap_projects(cls, value):
        if not isinstance(value, list):
            return value
        return [Project.model_validate(p) if isinstance(p, dict) else p for p in value]

    @model_validator(mode="wrap")
    @classmethod
    def remember_key_order(cls, data, handler):
        person = handler(data)
        if isinstance(data, dict):
            person._key_order = list(data)
        return person

    def properties(self) -> Dict[str, Any]:
        """
        Own properties as they appeared in the source record, keyed by JSON name
        and in the record's key order. Fields the record never had are left out.
        """
        values = {}
        for field_name, field in type(self).model_fields.items():
            if field_name in self.model_fields_set:
                values[field.alias or field_name] = getattr(self, field_name)
        values.update(self.model_extra or {})

        props = {key: values[key] for key in self._key_order if key in values}
        props.update(values)
        return props
