from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParamKind(str, Enum):
    NICK = "nick"
    CHANNEL = "channel"
    NICK_OR_CHANNEL = "nick_or_channel"
    TEXT = "text"


class CommandKind(str, Enum):
    NONE = "none"
    AWAY = "away"
    HELP = "help"
    TLSCONNECT = "tlsconnect"
    CONNECT = "connect"
    QUIT = "quit"
    QUERY = "query"
    JOIN = "join"
    PART = "part"
    WHOIS = "whois"
    ME = "me"
    MSG = "msg"
    NICK = "nick"
    NAMES = "names"
    STATUS = "status"


class ParamSlot(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    kind: ParamKind

    @property
    def placeholder(self) -> str:
        return f"<{self.name.lower()}>"


class CommandDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    kind: CommandKind
    parameters: tuple[ParamSlot, ...] = ()
    help: str = ""

    @property
    def is_sentinel(self) -> bool:
        return self.kind is CommandKind.NONE

    @property
    def first_param_kind(self) -> ParamKind | None:
        if not self.parameters:
            return None
        return self.parameters[0].kind


class HelpEntry(BaseModel):
    name: str
    placeholders: list[str] = Field(default_factory=list)
    help: str = ""

    def render(self) -> str:
        head = " ".join([self.name, *self.placeholders])
        return f"{head} - {self.help}"


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    blocked_commands: list[str] = Field(default_factory=list)
    status_events: bool = True

    @field_validator("blocked_commands")
    @classmethod
    def _strip_names(cls, value: list[str]) -> list[str]:
        return [name.strip() for name in value if name.strip()]

    def is_blocked(self, command_name: str) -> bool:
        return command_name in self.blocked_commands
