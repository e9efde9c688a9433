"""Client state and handling of the server's graphical protocol messages."""

import re
from itertools import islice

from zappygui.buffer import CommunicationBuffer

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_STOI = re.compile(r"\s*([+-]?\d+)")
_WORD = re.compile(r"\s*(\S+)")
_NUMBER = re.compile(r"\s*([+-]?\d+)")


class CoreError(RuntimeError):
    """Raised when the client cannot be set up or started."""


def _parse_port(text):
    match = _STOI.match(text)
    if match is None:
        raise CoreError("Invalid port: not a number")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise CoreError("Invalid port: number out of range")
    return value


class _Fields:
    """Reads whitespace-separated fields from a message, stopping at the first failure."""

    def __init__(self, text):
        self._text = text
        self._pos = 0
        self.ok = True

    def _take(self, pattern):
        if not self.ok:
            return None
        match = pattern.match(self._text, self._pos)
        if match is None:
            self.ok = False
            return None
        self._pos = match.end()
        return match.group(1)

    def word(self):
        value = self._take(_WORD)
        return "" if value is None else value

    def number(self):
        value = self._take(_NUMBER)
        return 0 if value is None else int(value)

    def numbers(self, count):
        return [self.number() for _ in range(count)]

    def words(self):
        while True:
            value = self._take(_WORD)
            if value is None:
                return
            yield value

    def rest(self):
        if not self.ok or self._pos >= len(self._text):
            self.ok = False
            return ""
        value = self._text[self._pos:]
        self._pos = len(self._text)
        return value


def _msz(f):
    width, height = f.numbers(2)
    return f"Map size: {width}x{height}"


def _bct(f):
    x, y = f.numbers(2)
    quantities = " ".join(map(str, f.numbers(7)))
    return f"Tile ({x},{y}) resources: {quantities}"


def _tna(f):
    return f"Team: {f.word()}"


def _pnw(f):
    player = f.word()
    x, y, _orientation, _level = f.numbers(4)
    team = f.word()
    return f"Player {player} connected at ({x},{y}) team: {team}"


def _ppo(f):
    player = f.word()
    x, y, orientation = f.numbers(3)
    return f"Player {player} position: ({x},{y}) orientation: {orientation}"


def _plv(f):
    player = f.word()
    return f"Player {player} level: {f.number()}"


def _pin(f):
    player = f.word()
    x, y = f.numbers(2)
    quantities = " ".join(map(str, f.numbers(7)))
    return f"Player {player} inventory at ({x},{y}): {quantities}"


def _pex(f):
    return f"Player {f.word()} expelled"


def _pbc(f):
    player = f.word()
    return f"Player {player} broadcast:{f.rest()}"


def _pic(f):
    x, y, level = f.numbers(3)
    players = "".join(f" player {p}" for p in f.words() if p.startswith("#"))
    return f"Incantation started at ({x},{y}) level {level}{players}"


def _pie(f):
    x, y, result = f.numbers(3)
    outcome = "success" if result != 0 else "failure"
    return f"Incantation ended at ({x},{y}) result: {outcome}"


def _pfk(f):
    return f"Player {f.word()} laid an egg"


def _pdr(f):
    player = f.word()
    return f"Player {player} dropped resource {f.number()}"


def _pgt(f):
    player = f.word()
    return f"Player {player} collected resource {f.number()}"


def _pdi(f):
    return f"Player {f.word()} died"


def _enw(f):
    egg = f.word()
    player = f.word()
    x, y = f.numbers(2)
    return f"New egg {egg} laid by {player} at ({x},{y})"


def _ebo(f):
    return f"Egg {f.word()} hatched"


def _edi(f):
    return f"Egg {f.word()} died"


def _sgt(f):
    return f"Time unit: {f.number()}"


def _seg(f):
    return f"Game ended, winner: {f.word()}"


def _smg(f):
    return f"Server message:{f.rest()}"


_FIXED_REPORTS = {
    "suc": "Unknown command sent to server",
    "sbp": "Bad parameters sent to server",
}

_DESCRIBERS = {
    "msz": _msz,
    "bct": _bct,
    "tna": _tna,
    "pnw": _pnw,
    "ppo": _ppo,
    "plv": _plv,
    "pin": _pin,
    "pex": _pex,
    "pbc": _pbc,
    "pic": _pic,
    "pie": _pie,
    "pfk": _pfk,
    "pdr": _pdr,
    "pgt": _pgt,
    "pdi": _pdi,
    "enw": _enw,
    "ebo": _ebo,
    "edi": _edi,
    "sgt": _sgt,
    "seg": _seg,
    "smg": _smg,
}


def describe_message(message):
    """Return the report lines for one server message; none for an empty message."""
    if not message:
        return []
    fields = _Fields(message)
    command = fields.word()
    if command in _FIXED_REPORTS:
        detail = _FIXED_REPORTS[command]
    elif command in _DESCRIBERS:
        detail = _DESCRIBERS[command](fields)
    else:
        detail = f"Unknown message from server: {message}"
    return [f"Received: {message}", detail]


class Core:
    """Connection settings and game state built from the server's messages."""

    def __init__(self, argv):
        """Read ``-p port`` and ``-h host`` from the command-line arguments."""
        self.hostname = ""
        self.port = 0
        self.time_unit = 0
        self.connected = False
        self.map_width = 10
        self.map_height = 10
        self.grid_ready = False
        self.buffer = CommunicationBuffer()

        argv = list(argv)
        for flag, value in islice(zip(argv, argv[1:]), 3):
            if flag == "-p":
                self.port = _parse_port(value)
            elif flag == "-h":
                self.hostname = value

        if self.port == 0 or not self.hostname:
            raise CoreError("Missing -p or -h argument")

    def handle_server_message(self, message):
        """Report one message on standard output and apply its effect on the state."""
        for line in describe_message(message):
            print(line)
        fields = _Fields(message)
        if fields.word() == "sgt":
            self.time_unit = fields.number()

    def feed(self, data):
        """Buffer received text and process every complete message; return those messages."""
        self.buffer.append_data(data)
        messages = self.buffer.extract_all_messages()
        for message in messages:
            fields = _Fields(message)
            if fields.word() == "msz":
                self.map_width = fields.number()
                if fields.ok:
                    self.map_height = fields.number()
                print(f"Map size: {self.map_width}x{self.map_height}")
                self.grid_ready = True
            self.handle_server_message(message)
        return messages