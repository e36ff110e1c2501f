"""Interactive menu for browsing and editing a product catalog."""

from __future__ import annotations

import re
import sys
from typing import Callable, Optional, TextIO

from .products import Catalog, Product, format_product, format_table, load_products

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_MENU = (
    "Menu:\n"
    "1 - Adicionar produto\n"
    "2 - Buscar produto por código\n"
    "3 - Imprimir produtos\n"
    "4 - Ordenar por preço e imprimir\n"
    "5 - Sair\n"
)

_EXIT_OPTION = 5


class _Prompter:
    """Line-oriented prompts; each numeric answer consumes its whole line."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._in = stdin
        self._out = stdout

    def _show(self, prompt: str) -> None:
        self._out.write(prompt)
        self._out.flush()

    def _nonblank_line(self) -> str:
        while True:
            line = self._in.readline()
            if not line:
                raise EOFError
            if line.strip():
                return line

    def _number(self, prompt: str, pattern: re.Pattern, convert: Callable):
        self._show(prompt)
        match = pattern.match(self._nonblank_line())
        return convert(match.group(1)) if match else None

    def integer(self, prompt: str) -> Optional[int]:
        return self._number(prompt, _INT, int)

    def real(self, prompt: str) -> Optional[float]:
        return self._number(prompt, _FLOAT, float)

    def word(self, prompt: str) -> str:
        self._show(prompt)
        return self._nonblank_line().split()[0]

    def text(self, prompt: str) -> Optional[str]:
        self._show(prompt)
        line = self._in.readline()
        if not line:
            return None
        return line[:-1] if line.endswith("\n") else line


def _add_product(catalog: Catalog, prompter: _Prompter, out: TextIO) -> bool:
    if catalog.is_full:
        out.write("Impossível adicionar: capacidade máxima atingida.\n")
        return False
    out.write("Novo produto - digite os dados solicitados.\n")
    code = prompter.integer("Código (inteiro): ")
    if code is None:
        out.write("Código inválido.\n")
        return False
    if catalog.find(code) is not None:
        out.write(f"Já existe um produto com o código {code}...\n")
        return False
    name = prompter.text("Nome: ")
    if name is None:
        out.write("Erro ao ler nome.\n")
        return False
    price = prompter.real("Preço (ex: 9.90): ")
    if price is None:
        out.write("Preço inválido.\n")
        return False
    quantity = prompter.integer("Quantidade (inteiro): ")
    if quantity is None:
        out.write("Quantidade inválida.\n")
        return False
    catalog.add(Product(code, name, price, quantity))
    return True


def _search_product(catalog: Catalog, prompter: _Prompter, out: TextIO) -> None:
    code = prompter.integer("Digite o código do produto a buscar: ")
    if code is None:
        out.write("Não existe produto com esse código... ( ╹ -╹)? \n")
        return
    product = catalog.find(code)
    if product is None:
        out.write(f"Produto de código {code} não encontrado. (╭ರ_•́)   \n")
    else:
        out.write("Produto encontrado:\n")
        out.write(format_product(product))


def run(
    catalog: Catalog, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> None:
    """Run the menu loop until the user chooses to leave or input ends."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    prompter = _Prompter(stdin, stdout)
    try:
        while True:
            stdout.write(_MENU)
            option = prompter.integer("Escolha uma opção: ")
            if option is None:
                stdout.write("Entrada inválida. Tente novamente...\n")
                continue
            match option:
                case 1:
                    if _add_product(catalog, prompter, stdout):
                        stdout.write(
                            "Produto adicionado com sucesso! Total de produtos "
                            f"agora é {len(catalog)}\n d-(´▽｀)-b"
                        )
                case 2:
                    _search_product(catalog, prompter, stdout)
                case 3:
                    stdout.write(format_table(catalog))
                case 4:
                    catalog.sort_by_price()
                    stdout.write("Produtos ordenados por preço (crescente):\n")
                    stdout.write(format_table(catalog))
                case 5:
                    stdout.write("Saindo...\n")
                case _:
                    stdout.write("Opção inválida, Tente novamente!\n")
            stdout.write("\n")
            if option == _EXIT_OPTION:
                return
    except EOFError:
        return


def main(argv: Optional[list[str]] = None) -> int:
    """Load a product file named on the command line or at a prompt, then run the menu."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        filename = args[0][:255]
    else:
        try:
            filename = _Prompter(sys.stdin, sys.stdout).word(
                "Por favor, digite: produtos.txt     : "
            )[:255]
        except EOFError:
            print("Não existe arquivo com esse nome... (•́ ᴖ`•̀) ", file=sys.stderr)
            return 1

    try:
        products = load_products(filename)
    except OSError:
        print(
            f"Não foi possível abrir esse arquivo '{filename}' ( ꩜ ᯅ ꩜;). "
            "Verifique se ele existe.",
            file=sys.stderr,
        )
        products = []

    sys.stdout.write(
        f'{len(products)} produtos carregados do arquivo "{filename}".\n\n ૮₍ ˶ᵔ ᵕ ᵔ˶ ₎ა'
    )
    run(Catalog(products), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())