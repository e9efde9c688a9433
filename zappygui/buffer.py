"""Accumulates raw server data and splits it into newline-terminated messages."""


class CommunicationBuffer:
    """Buffer of incoming text, consumed one complete line at a time."""

    def __init__(self):
        self._input = ""

    def append_data(self, data):
        """Append received text; ``None`` is ignored."""
        if data is not None:
            self._input += data

    def has_complete_message(self):
        """Return True if at least one newline-terminated message is buffered."""
        return "\n" in self._input

    def extract_next_message(self):
        """Remove and return the next message without its newline, or "" if none."""
        message, sep, rest = self._input.partition("\n")
        if not sep:
            return ""
        self._input = rest
        return message

    def extract_all_messages(self):
        """Remove every complete message and return the non-empty ones in order."""
        messages = []
        while self.has_complete_message():
            message = self.extract_next_message()
            if message:
                messages.append(message)
        return messages

    def clear(self):
        """Discard everything buffered."""
        self._input = ""

    def empty(self):
        """Return True if nothing is buffered."""
        return not self._input

    @property
    def raw_buffer(self):
        """The buffered text, including any incomplete trailing message."""
        return self._input

    def __len__(self):
        return len(self._input)