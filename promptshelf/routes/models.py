"""Pydantic request models for API endpoints."""

from pydantic import BaseModel


class Credentials(BaseModel):
    username: str = ""
    password: str = ""


class CreateCategory(BaseModel):
    name: str = ""


class RenameCategory(BaseModel):
    new_name: str = ""


class CreateEntry(BaseModel):
    owner: str = ""
    category: str = ""
    prompt_text: str = ""
    image: str = ""
    tags: list[str] | str | None = None
    done: bool = False


class UpdateEntry(BaseModel):
    owner: str | None = None
    category: str | None = None
    prompt_text: str | None = None
    image: str | None = None
    tags: list[str] | None = None
    done: bool | None = None


class UpdateStoryMeta(BaseModel):
    scenario: str | None = None
    theme_color: str | None = None


class CreateScene(BaseModel):
    image: str = ""
    prompt_text: str = ""
    video_title: str = ""
    duration: int | str | None = None
    animation_prompt: str = ""
    tags: list[str] | str | None = None


class UpdateScene(BaseModel):
    image: str | None = None
    prompt_text: str | None = None
    video_title: str | None = None
    duration: int | str | None = None
    animation_prompt: str | None = None
    tags: list[str] | str | None = None
    done: bool | None = None


class SceneDone(BaseModel):
    done: bool


class CreateMaterial(BaseModel):
    owner: str = ""
    title: str = ""
    type: str = "link"
    url: str = ""
    tags: list[str] | str | None = None
