"""Binding and Rule Data Models."""

from enum import Enum
from typing import Any, Literal
from pydantic import BaseModel, ConfigDict, Field


class BindingMode(str, Enum):
    """How a binding is triggered."""

    DIRECT = "direct"
    INDIRECT = "indirect"


class BindingDescriptor(BaseModel):
    """Declarative source -> target wiring instruction."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: str = Field(..., description="Widget whose value is read")
    target: str = Field(..., description="Widget whose handler is invoked")
    mode: BindingMode = Field(..., description="direct (source onChange) or indirect (via onClick)")
    via: str | None = Field(default=None, description="Widget whose click fires an indirect binding")
    source_property: str | None = Field(default=None, alias="source-property")
    target_property: str | None = Field(default=None, alias="target-property")


class Action(BaseModel):
    """A single target + action type + argument templates."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Action type, e.g. setValue")
    target: str = Field(..., description="Target widget id")
    args: dict[str, Any] = Field(default_factory=dict)


class Rule(BaseModel):
    """Static mapping from a trigger to an ordered sequence of actions."""

    model_config = ConfigDict(frozen=True)

    trigger: str = Field(..., description="Trigger name, '<widget-id>.<event>'")
    actions: tuple[Action, ...] = Field(default_factory=tuple)


ComponentType = Literal["calendar", "button", "chart", "dropdown", "textbox"]


class ComponentConfig(BaseModel):
    """Widget declared on a page."""

    id: str
    type: ComponentType
    props: dict[str, Any] = Field(default_factory=dict)


class PageConfig(BaseModel):
    """Complete page configuration document."""

    components: list[ComponentConfig] = Field(default_factory=list)
    bindings: list[BindingDescriptor] = Field(default_factory=list)
