from varlang.modules.symbols import Symbol, SymTable


def test_insert_and_find():
    table = SymTable()
    table.insert("x", Symbol("x", "int"))
    assert table.find("x") == Symbol("x", "int")
    assert table.find("y") is None


def test_redeclaration_replaces_symbol():
    table = SymTable()
    table.insert("x", Symbol("x", "int"))
    table.insert("x", Symbol("x", "float"))
    assert table.find("x").type == "float"
    assert list(table.table) == ["x"]


def test_zero_follows_declared_type():
    assert Symbol("f", "float").zero() == 0.0
    assert isinstance(Symbol("f", "float").zero(), float)
    assert Symbol("i", "int").zero() == 0
    assert isinstance(Symbol("i", "int").zero(), int)
    assert Symbol("s", "anything").zero() == 0
