from ircline.commands.tokenizer import tokenize


def test_fields_and_rest_preserve_embedded_spacing():
    command = tokenize("/msg bob hello   there")
    assert command.fields == ("/msg", "bob", "hello", "there")
    assert command.name == "/msg"
    assert command.rest(2) == "hello   there"


def test_rest_skips_leading_spaces_before_the_field():
    command = tokenize("/me   slaps  quite")
    assert command.rest(1) == "slaps  quite"


def test_rest_past_last_field_is_empty():
    command = tokenize("/quit")
    assert command.rest(1) == ""
    assert command.field(1) == ""
    assert command.field(1, "default") == "default"


def test_line_terminator_is_not_part_of_rest():
    command = tokenize("/msg bob hi\r\n")
    assert command.rest(2) == "hi"


def test_blank_line_has_no_fields():
    command = tokenize("   \n")
    assert len(command) == 0
    assert command.name == ""
