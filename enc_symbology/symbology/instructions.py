"""
Render instruction tokens.

A render instruction is an ordered, immutable sequence of drawing
directives handed to the renderer as a string such as::

    ;OP(8OD13010);LS(SOLD,2,DEPSC)

Each directive is a token class below. ``RenderInstruction.serialize``
and ``RenderInstruction.parse`` are exact inverses of each other.
"""

import logging
import re
from dataclasses import dataclass
from typing import ClassVar, Dict, Iterator, List, Optional, Tuple, Type, Union

from ..exceptions import InstructionSyntaxError

logger = logging.getLogger("enc_symbology.symbology.instructions")

# Rotation given in degrees rather than as an attribute code
NUMERIC_ROTATION = re.compile(r"[-+]?\d+(\.\d*)?([eE][-+]?\d+)?$")


# ============================================================================
# Argument formatting and splitting
# ============================================================================

def _quote(text: str) -> str:
    return "'" + text.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _split_arguments(text: str) -> List[Tuple[str, bool]]:
    """Split ``a,'b,c',d`` into ``[(a, False), ('b,c', True), (d, False)]``."""
    arguments = []
    current = []
    quoted = False
    in_quote = False
    i = 0
    while i < len(text):
        char = text[i]
        if in_quote:
            if char == "\\" and i + 1 < len(text):
                current.append(text[i + 1])
                i += 2
                continue
            if char == "'":
                in_quote = False
            else:
                current.append(char)
        elif char == "'":
            if "".join(current).strip():
                raise InstructionSyntaxError(f"Unexpected quote in arguments: {text!r}")
            current = []
            in_quote = True
            quoted = True
        elif char == ",":
            arguments.append(_finish_argument(current, quoted, text))
            current = []
            quoted = False
        else:
            current.append(char)
        i += 1

    if in_quote:
        raise InstructionSyntaxError(f"Unterminated quote in arguments: {text!r}")
    arguments.append(_finish_argument(current, quoted, text))
    return arguments


def _finish_argument(chars: List[str], quoted: bool, text: str) -> Tuple[str, bool]:
    value = "".join(chars)
    if quoted:
        return value, True
    return value.strip(), False


def _to_int(value: str, token: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise InstructionSyntaxError(f"{token}: expected an integer, got {value!r}")


def _to_number(value: str, token: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise InstructionSyntaxError(f"{token}: expected a number, got {value!r}")


def _expect(arguments: List[Tuple[str, bool]], count: int, token: str) -> List[str]:
    if len(arguments) != count:
        raise InstructionSyntaxError(f"{token} takes {count} arguments, got {len(arguments)}")
    return [value for value, _ in arguments]


# ============================================================================
# Tokens
# ============================================================================

class Token:
    """Base class of render instruction tokens."""

    code: ClassVar[str] = ""

    def arguments(self) -> str:
        raise NotImplementedError

    def serialize(self) -> str:
        return f"{self.code}({self.arguments()})"

    @classmethod
    def from_arguments(cls, arguments: List[Tuple[str, bool]]) -> "Token":
        raise NotImplementedError

    def __str__(self) -> str:
        return self.serialize()


@dataclass(frozen=True)
class AreaColor(Token):
    """Area fill with a colour token, ``AC(DEPVS)``."""

    colour: str
    code: ClassVar[str] = "AC"

    def arguments(self) -> str:
        return self.colour

    @classmethod
    def from_arguments(cls, arguments):
        return cls(*_expect(arguments, 1, cls.code))


@dataclass(frozen=True)
class AreaPattern(Token):
    """Area fill with a pattern, ``AP(DIAMOND1)``."""

    pattern: str
    code: ClassVar[str] = "AP"

    def arguments(self) -> str:
        return self.pattern

    @classmethod
    def from_arguments(cls, arguments):
        return cls(*_expect(arguments, 1, cls.code))


@dataclass(frozen=True)
class LineStyle(Token):
    """Simple line, ``LS(SOLD,2,DEPSC)``; pattern is SOLD, DASH or DOTT."""

    pattern: str
    width: int
    colour: str
    code: ClassVar[str] = "LS"

    def arguments(self) -> str:
        return f"{self.pattern},{self.width},{self.colour}"

    @classmethod
    def from_arguments(cls, arguments):
        pattern, width, colour = _expect(arguments, 3, cls.code)
        return cls(pattern, _to_int(width, cls.code), colour)


@dataclass(frozen=True)
class LineComposed(Token):
    """Complex (symbolized) line, ``LC(LOWACC21)``."""

    name: str
    code: ClassVar[str] = "LC"

    def arguments(self) -> str:
        return self.name

    @classmethod
    def from_arguments(cls, arguments):
        return cls(*_expect(arguments, 1, cls.code))


@dataclass(frozen=True)
class PointSymbol(Token):
    """Point symbol with optional rotation.

    The rotation is a number of degrees or the code of the attribute that
    holds it, e.g. ``SY(LIGHTS01,135)`` or ``SY(LIGHTS01,ORIENT)``.
    """

    name: str
    rotation: Union[float, str, None] = None
    code: ClassVar[str] = "SY"

    def __post_init__(self):
        rotation = self.rotation
        if isinstance(rotation, str) and NUMERIC_ROTATION.match(rotation.strip()):
            rotation = float(rotation)
        if isinstance(rotation, (int, float)) and not isinstance(rotation, bool):
            object.__setattr__(self, "rotation", float(rotation))

    def arguments(self) -> str:
        if self.rotation is None:
            return self.name
        if isinstance(self.rotation, str):
            return f"{self.name},{self.rotation}"
        return f"{self.name},{_format_number(self.rotation)}"

    @classmethod
    def from_arguments(cls, arguments):
        if len(arguments) == 1:
            return cls(arguments[0][0])
        name, rotation = _expect(arguments, 2, cls.code)
        return cls(name, rotation)


@dataclass(frozen=True)
class Text(Token):
    """Text label.

    Three forms are supported:

    - literal text, ``TX('NMT',...)``
    - the value of an attribute, ``TX(OBJNAM,...)`` (``attribute_ref=True``)
    - a printf template filled from attributes,
      ``TE('%03.0lf deg','ORIENT',...)`` (``attributes`` non-empty)

    The remaining fields are the horizontal and vertical justification,
    character spacing, font characteristics string, x and y offsets in
    units of the font body size, colour token and display group.
    """

    text: str
    hjust: int = 3
    vjust: int = 2
    space: int = 3
    chars: str = "15110"
    x_offset: int = 0
    y_offset: int = 0
    colour: str = "CHBLK"
    display_group: int = 23
    attributes: Tuple[str, ...] = ()
    attribute_ref: bool = False

    def __post_init__(self):
        object.__setattr__(self, "attributes", tuple(self.attributes))
        if self.attributes and self.attribute_ref:
            raise ValueError("Template text cannot also be an attribute reference")

    @property
    def code(self) -> str:
        return "TE" if self.attributes else "TX"

    def arguments(self) -> str:
        if self.attributes:
            head = f"{_quote(self.text)},{_quote(','.join(self.attributes))}"
        elif self.attribute_ref:
            head = self.text
        else:
            head = _quote(self.text)
        return (
            f"{head},{self.hjust},{self.vjust},{self.space},{_quote(self.chars)},"
            f"{self.x_offset},{self.y_offset},{self.colour},{self.display_group}"
        )

    @classmethod
    def from_arguments(cls, arguments, template: bool = False):
        token = "TE" if template else "TX"
        head = arguments[:2] if template else arguments[:1]
        values = _expect(arguments[len(head):], 8, token)
        hjust, vjust, space, chars, x_offset, y_offset, colour, group = values
        options = dict(
            hjust=_to_int(hjust, token),
            vjust=_to_int(vjust, token),
            space=_to_int(space, token),
            chars=chars,
            x_offset=_to_int(x_offset, token),
            y_offset=_to_int(y_offset, token),
            colour=colour,
            display_group=_to_int(group, token),
        )
        if template:
            if len(head) != 2:
                raise InstructionSyntaxError("TE takes a template and an attribute list")
            names = tuple(name.strip() for name in head[1][0].split(",") if name.strip())
            if not names:
                raise InstructionSyntaxError("TE needs at least one attribute")
            return cls(head[0][0], attributes=names, **options)
        text, quoted = head[0]
        return cls(text, attribute_ref=not quoted, **options)


@dataclass(frozen=True)
class DisplayPriorityOverride(Token):
    """Display priority override, ``OP(8OD13010)``.

    The code holds, in order: display priority digit, radar flag
    (``O`` over radar, ``S`` suppressed), display category letter and a
    five digit viewing group. A ``-`` keeps the look-up table value and a
    shorter code leaves the trailing fields unchanged.
    """

    level: str
    code: ClassVar[str] = "OP"

    def __post_init__(self):
        if not self.level or len(self.level) > 8:
            raise ValueError(f"Invalid display priority override {self.level!r}")

    def _field(self, start: int, end: int) -> Optional[str]:
        value = self.level[start:end]
        if not value or set(value) == {"-"}:
            return None
        return value

    @property
    def priority(self) -> Optional[int]:
        value = self._field(0, 1)
        return int(value) if value is not None and value.isdigit() else None

    @property
    def radar(self) -> Optional[str]:
        return self._field(1, 2)

    @property
    def category(self) -> Optional[str]:
        return self._field(2, 3)

    @property
    def viewing_group(self) -> Optional[int]:
        value = self._field(3, 8)
        return int(value) if value is not None and value.isdigit() else None

    def arguments(self) -> str:
        return self.level

    @classmethod
    def from_arguments(cls, arguments):
        (level,) = _expect(arguments, 1, cls.code)
        try:
            return cls(level)
        except ValueError as e:
            raise InstructionSyntaxError(str(e))


TOKEN_TYPES: Dict[str, Type[Token]] = {
    "AC": AreaColor,
    "AP": AreaPattern,
    "LS": LineStyle,
    "LC": LineComposed,
    "SY": PointSymbol,
    "OP": DisplayPriorityOverride,
}


# ============================================================================
# Instruction sequence
# ============================================================================

def _split_tokens(text: str) -> List[str]:
    """Split an instruction string on ``;`` outside quotes."""
    parts = []
    current = []
    in_quote = False
    escaped = False
    for char in text:
        if escaped:
            current.append(char)
            escaped = False
            continue
        if char == "\\" and in_quote:
            current.append(char)
            escaped = True
            continue
        if char == "'":
            in_quote = not in_quote
        if char == ";" and not in_quote:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    if in_quote:
        raise InstructionSyntaxError(f"Unterminated quote in instruction: {text!r}")
    parts.append("".join(current))
    return [part.strip() for part in parts if part.strip()]


def parse_token(text: str) -> Token:
    """
    Parse a single token such as ``LS(DASH,1,CHBLK)``.

    Raises:
        InstructionSyntaxError: If the token is malformed or unknown
    """
    text = text.strip()
    open_at = text.find("(")
    if open_at <= 0 or not text.endswith(")"):
        raise InstructionSyntaxError(f"Malformed token: {text!r}")

    name = text[:open_at].strip()
    arguments = _split_arguments(text[open_at + 1:-1])

    if name == "TX":
        return Text.from_arguments(arguments)
    if name == "TE":
        return Text.from_arguments(arguments, template=True)
    if name not in TOKEN_TYPES:
        raise InstructionSyntaxError(f"Unknown token {name!r} in {text!r}")
    return TOKEN_TYPES[name].from_arguments(arguments)


@dataclass(frozen=True)
class RenderInstruction:
    """Ordered, immutable sequence of render tokens.

    Example:
        >>> instruction = RenderInstruction.of(AreaColor("DEPVS"), AreaPattern("DIAMOND1"))
        >>> instruction.serialize()
        ';AC(DEPVS);AP(DIAMOND1)'
        >>> RenderInstruction.parse(instruction.serialize()) == instruction
        True
    """

    tokens: Tuple[Token, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "tokens", tuple(self.tokens))

    @classmethod
    def of(cls, *tokens: Token) -> "RenderInstruction":
        return cls(tokens)

    @classmethod
    def empty(cls) -> "RenderInstruction":
        return cls(())

    @classmethod
    def parse(cls, text: str) -> "RenderInstruction":
        """Parse a serialized instruction string."""
        if text is None:
            raise InstructionSyntaxError("Cannot parse None")
        return cls(tuple(parse_token(part) for part in _split_tokens(text)))

    def serialize(self) -> str:
        return "".join(f";{token.serialize()}" for token in self.tokens)

    def __add__(self, other: Union["RenderInstruction", Token]) -> "RenderInstruction":
        if isinstance(other, Token):
            return RenderInstruction(self.tokens + (other,))
        if isinstance(other, RenderInstruction):
            return RenderInstruction(self.tokens + other.tokens)
        return NotImplemented

    def __bool__(self) -> bool:
        return bool(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __str__(self) -> str:
        return self.serialize()

    def find(self, token_type: Type[Token]) -> List[Token]:
        """All tokens of one type, in order."""
        return [token for token in self.tokens if isinstance(token, token_type)]
