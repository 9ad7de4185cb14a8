from pydantic import BaseModel, Field
from typing import Literal


class SourceConfig(BaseModel):
    commands_dir: str = "commands"
    agents_dir: str = "agents"
    extension: str = ".md"


class OutputConfig(BaseModel):
    base_dir: str = ".opencode"
    commands_dir: str = "commands"
    agents_dir: str = "agents"


class NamingConfig(BaseModel):
    root_command: str = "pm"
    command_prefix: str = "pm-"


class RefsConfig(BaseModel):
    prefixes: list[str] = ["/pm:", "/design:", "/backlog:"]
    replacement: str = "/pm-"


class ModelsConfig(BaseModel):
    aliases: dict[str, str] = {
        "sonnet": "anthropic/claude-sonnet",
        "haiku": "anthropic/claude-haiku",
        "opus": "anthropic/claude-opus",
    }
    default_alias: str = "sonnet"
    fallback: str = "anthropic/claude-sonnet"


class AgentConfig(BaseModel):
    mode: str = "subagent"
    # Order is preserved in the rendered tools block
    tools: dict[str, bool] = {
        "read": True,
        "glob": True,
        "grep": True,
        "bash": True,
        "write": False,
        "edit": False,
    }


class TranslateConfig(BaseModel):
    source: SourceConfig = Field(default_factory=SourceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)
    refs: RefsConfig = Field(default_factory=RefsConfig)
    models: ModelsConfig = Field(default_factory=ModelsConfig)
    agent: AgentConfig = Field(default_factory=AgentConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
