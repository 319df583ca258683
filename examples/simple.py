"""
Exemplo mínimo de uso do flagconf.

Execute a partir da raiz do repositório:

    python examples/simple.py -foo.bar=hello -workers 4
"""

from dataclasses import dataclass, field
from pathlib import Path

import flagconf


@dataclass
class Foo:
    bar: str = flagconf.setting("", desc="greeting printed at startup")


@dataclass
class Config:
    workers: int = flagconf.setting(2, toml="threads", desc="number of worker threads")
    tags: flagconf.Strings = field(default_factory=flagconf.Strings)
    foo: Foo = field(default_factory=Foo)


def main() -> None:
    config = Config()
    report = flagconf.must_parse(Path(__file__).with_name("simple.toml"), config)
    print(config)
    print(report.origins)


if __name__ == "__main__":
    main()
