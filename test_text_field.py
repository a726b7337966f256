from text_field import TextField


def test_insert_appends_at_end():
    field = TextField("Namespace", "mod")
    field.insert("i")
    field.insert("d")
    assert field.text == "modid"
    assert field.cursor == 5


def test_backspace_removes_last_and_stops_at_empty():
    field = TextField("Identifier", "ab")
    field.backspace()
    assert field.text == "a"
    field.backspace()
    field.backspace()
    assert field.text == ""
    assert field.cursor == 0


def test_cursor_moves_edit_in_the_middle():
    field = TextField("Identifier", "rby")
    field.move_home()
    field.move_right()
    field.insert("u")
    assert field.text == "ruby"
    field.move_end()
    field.move_left()
    field.backspace()
    assert field.text == "ruy"


def test_visible_scrolls_to_keep_cursor_in_view():
    field = TextField("Identifier", "abcdefghij")
    visible, col = field.visible(4)
    assert visible == "ghij"
    assert col == 4
    field.move_home()
    visible, col = field.visible(4)
    assert visible == "abcd"
    assert col == 0
