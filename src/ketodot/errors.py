"""Error types raised across the ketodot pipeline."""

from __future__ import annotations


class KetodotError(Exception):
    def __init__(self, code: str, detail: str | None = None) -> None:
        super().__init__(code)
        self.code = code
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"{self.code}: {self.detail}"
        return self.code


class TupleParseError(KetodotError):
    """A line could not be decoded into a relation tuple.

    ``line_number`` is 1-based and, like ``source``, is filled in by the reader
    when the parser is driven from a file.
    """

    def __init__(
        self,
        code: str,
        detail: str,
        *,
        line: str,
        line_number: int | None = None,
        source: str | None = None,
    ) -> None:
        super().__init__(code, detail)
        self.line = line
        self.line_number = line_number
        self.source = source

    def location(self) -> str:
        source = self.source or "<input>"
        if self.line_number is None:
            return source
        return f"{source}:{self.line_number}"

    def __str__(self) -> str:
        return f"could not decode {self.location()}\n  {self.line}\n\n{self.code}: {self.detail}"


class MissingSeparator(TupleParseError):
    def __init__(
        self,
        separator: str,
        *,
        line: str,
        line_number: int | None = None,
        source: str | None = None,
    ) -> None:
        super().__init__(
            "MISSING_SEPARATOR",
            f"expected input to contain '{separator}'",
            line=line,
            line_number=line_number,
            source=source,
        )
        self.separator = separator


class MalformedIndirectSet(TupleParseError):
    def __init__(
        self,
        subject: str,
        *,
        line: str,
        line_number: int | None = None,
        source: str | None = None,
    ) -> None:
        super().__init__(
            "MALFORMED_INDIRECT_SET",
            f"subject set '{subject}' is not of the form namespace:object#relation",
            line=line,
            line_number=line_number,
            source=source,
        )
        self.subject = subject


class PaletteExhausted(KetodotError):
    def __init__(self, components: int) -> None:
        super().__init__(
            "PALETTE_EXHAUSTED",
            f"no color left for component #{components}",
        )
        self.components = components


class SourceReadError(KetodotError):
    def __init__(self, source: str, reason: str) -> None:
        super().__init__("SOURCE_UNREADABLE", f"could not read {source}: {reason}")
        self.source = source


class ConfigError(KetodotError):
    def __init__(self, detail: str) -> None:
        super().__init__("INVALID_CONFIG", detail)


class RenderError(KetodotError):
    def __init__(self, detail: str) -> None:
        super().__init__("RENDER_FAILED", detail)


__all__ = [
    "ConfigError",
    "KetodotError",
    "MalformedIndirectSet",
    "MissingSeparator",
    "PaletteExhausted",
    "RenderError",
    "SourceReadError",
    "TupleParseError",
]
