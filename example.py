"""Example usage of the structedit library."""

import logging
from dataclasses import dataclass, field

from structedit import Editor, embed, int64, float32, tagged


@dataclass
class Network:
    Host: str = tagged("Host:server host name", default="localhost")
    Port: int = tagged("Port:TCP port to listen on", default=8080)


@dataclass
class Settings:
    StrFoo: str = tagged("Foo:that's a foo", default="")
    IntBar: int = tagged("Bar:enter a bar value", default=0)
    Bool: bool = tagged("bool:enter a boolean value", default=False)
    SkipMe: str = tagged("-:this should be skipped", default="")
    OmitMe: int64 = tagged(",omitempty:this should be skipped when zero", default=0)
    FloatNoTag: float32 = 0.0
    Net: Network = embed(Network)
    unexported: str = field(default="", metadata={"ed": "unexported:this should not be visible"})


logging.basicConfig(level=logging.WARNING)

settings = Settings()
print(settings)

editor = Editor()
editor.ask("sample", settings)

print(settings)
