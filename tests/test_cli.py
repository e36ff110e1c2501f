import io
import sys

from prodcat.cli import main, run
from prodcat.products import Catalog, Product, format_table


def _session(catalog, text):
    out = io.StringIO()
    run(catalog, io.StringIO(text), out)
    return out.getvalue()


def _sample():
    return Catalog(
        [
            Product(1, "Arroz", 9.9, 10),
            Product(2, "Feijao", 7.5, 3),
            Product(3, "Cafe", 12.0, 4),
        ]
    )


def test_list_products_prints_table():
    catalog = _sample()
    output = _session(catalog, "3\n5\n")
    assert format_table(catalog) in output
    assert "Saindo...\n" in output


def test_add_product_flow():
    catalog = Catalog()
    output = _session(catalog, "1\n7\nCafe Torrado\n12.5\n4\n5\n")
    assert catalog.find(7) == Product(7, "Cafe Torrado", 12.5, 4)
    assert "Produto adicionado com sucesso! Total de produtos agora é 1" in output


def test_add_duplicate_code_is_refused():
    catalog = _sample()
    output = _session(catalog, "1\n2\n5\n")
    assert "Já existe um produto com o código 2..." in output
    assert len(catalog) == 3


def test_add_with_invalid_price():
    catalog = Catalog()
    output = _session(catalog, "1\n8\nSal\nbarato\n5\n")
    assert "Preço inválido." in output
    assert catalog.find(8) is None


def test_add_when_full():
    catalog = Catalog([Product(1, "A", 1.0, 1)], capacity=1)
    output = _session(catalog, "1\n5\n")
    assert "Impossível adicionar: capacidade máxima atingida." in output


def test_search_found_and_missing():
    output = _session(_sample(), "2\n2\n2\n99\n5\n")
    assert "Produto encontrado:\nCódigo: 2\nNome: Feijao\n" in output
    assert "Produto de código 99 não encontrado." in output


def test_sort_option_sorts_catalog():
    catalog = _sample()
    output = _session(catalog, "4\n5\n")
    prices = [p.price for p in catalog]
    assert prices == sorted(prices)
    assert "Produtos ordenados por preço (crescente):\n" + format_table(catalog) in output


def test_invalid_option_and_input():
    output = _session(_sample(), "9\nabc\n5\n")
    assert "Opção inválida, Tente novamente!" in output
    assert "Entrada inválida. Tente novamente..." in output


def test_end_of_input_stops_session():
    output = _session(_sample(), "3\n")
    assert output.count("Menu:") == 2
    assert "Saindo" not in output


def test_main_with_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "produtos.txt"
    path.write_text("1 Arroz 9.9 10\n2 Feijao 7.5 3\n", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n5\n"))
    assert main([str(path)]) == 0
    output = capsys.readouterr().out
    assert f'2 produtos carregados do arquivo "{path}".' in output
    assert "Feijao" in output


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    missing = tmp_path / "nada.txt"
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n"))
    assert main([str(missing)]) == 0
    captured = capsys.readouterr()
    assert "Não foi possível abrir esse arquivo" in captured.err
    assert "0 produtos carregados" in captured.out


def test_main_prompts_for_filename(tmp_path, monkeypatch, capsys):
    path = tmp_path / "produtos.txt"
    path.write_text("1 Arroz 9.9 10\n", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO(f"{path}\n5\n"))
    assert main([]) == 0
    assert "1 produtos carregados" in capsys.readouterr().out


def test_main_without_filename_fails(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([]) == 1
    assert "Não existe arquivo com esse nome" in capsys.readouterr().err