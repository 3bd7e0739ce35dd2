"""Defines the symbol table."""


class Symbol:
    """Estrutura para salvar o nome de uma variável e o tipo declarado."""

    var: str
    type: str

    def __init__(self, var: str, type: str) -> None:
        self.var = var
        self.type = type

    def zero(self) -> int | float:
        """Initial value a declaration binds: `0.0` for floats, `0` otherwise."""
        return 0.0 if self.type == "float" else 0

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Symbol)
            and self.var == other.var
            and self.type == other.type
        )

    def __repr__(self) -> str:
        return f"Symbol(var='{self.var}', type='{self.type}')"


class SymTable:
    """Tabela de símbolos do escopo global.

    There is a single flat scope. Declaring a name again replaces its
    symbol instead of failing.
    """

    table: dict[str, Symbol]  # Tabela inicia vazia

    def __init__(self) -> None:
        self.table = {}

    def insert(self, id: str, symbol: Symbol) -> None:
        """
        Insere (ou substitui) um símbolo na tabela.

        :param id: Identificador do símbolo a inserir.
        :param symbol: Símbolo a ser inserido.
        """
        self.table[id] = symbol

    def find(self, id: str) -> Symbol | None:
        """
        Busca por um símbolo na tabela.

        :param id: Identificador do símbolo a ser buscado.
        :return: Retorna o símbolo encontrado, ou `None`.
        """
        return self.table.get(id)
