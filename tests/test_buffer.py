from zappygui.buffer import CommunicationBuffer


def test_new_buffer_is_empty():
    buf = CommunicationBuffer()
    assert buf.empty()
    assert len(buf) == len("")
    assert not buf.has_complete_message()


def test_partial_message_is_not_complete():
    buf = CommunicationBuffer()
    buf.append_data("msz 10")
    assert not buf.has_complete_message()
    assert buf.extract_next_message() == ""
    assert buf.raw_buffer == "msz 10"


def test_message_completed_over_two_chunks():
    buf = CommunicationBuffer()
    buf.append_data("msz 10")
    buf.append_data(" 12\n")
    assert buf.has_complete_message()
    assert buf.extract_next_message() == "msz 10 12"
    assert buf.empty()


def test_extract_next_keeps_remainder():
    buf = CommunicationBuffer()
    buf.append_data("sgt 100\nbct 0 0")
    assert buf.extract_next_message() == "sgt 100"
    assert buf.raw_buffer == "bct 0 0"
    assert len(buf) == len("bct 0 0")


def test_extract_all_skips_empty_lines():
    buf = CommunicationBuffer()
    buf.append_data("tna red\n\ntna blue\n\nppo")
    assert buf.extract_all_messages() == ["tna red", "tna blue"]
    assert buf.raw_buffer == "ppo"


def test_extract_all_on_incomplete_returns_nothing():
    buf = CommunicationBuffer()
    buf.append_data("pnw #1")
    assert buf.extract_all_messages() == []
    assert buf.raw_buffer == "pnw #1"


def test_none_is_ignored():
    buf = CommunicationBuffer()
    buf.append_data("abc")
    buf.append_data(None)
    assert buf.raw_buffer == "abc"


def test_clear():
    buf = CommunicationBuffer()
    buf.append_data("msz 1 1\nrest")
    buf.clear()
    assert buf.empty()
    assert buf.raw_buffer == ""
    assert buf.extract_all_messages() == []


def test_length_tracks_consumption():
    buf = CommunicationBuffer()
    buf.append_data("a\nbb\nccc")
    before = len(buf)
    first = buf.extract_next_message()
    assert len(buf) == before - len(first) - 1