# prodcat

A small product catalogue you drive from the terminal, plus a handful of
independent helpers for searching, sorting, matrices, factorials and
Fibonacci numbers, simple statistics, temperature reports and plane
geometry.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The catalogue

Products are read from a plain text file of whitespace-separated records:

```
<code> <name> <price> <quantity>
```

For example:

```
101 Cafe 9.90 12
102 Acucar 4.50 30
```

The code and quantity are integers, the price a decimal number, and the name
a single word of at most 63 characters. When a field after the code cannot be
read, the rest of that line is skipped and reading carries on with the next
line; when a code cannot be read, reading stops there. At most 200 products
are loaded.

Start the program with the file name:

```
prodcat produtos.txt
```

or, equivalently, `python -m prodcat.cli produtos.txt`. If no file name is
given, it asks for one. If the file cannot be opened, an error is printed and
the menu starts with an empty catalogue. The menu (in Portuguese) then lets
you:

1. add a product: code, name (a whole line, spaces allowed), price and
   quantity; the code must not already be in use and the catalogue holds at
   most 200 products,
2. look up a product by code,
3. print all products as a table,
4. sort the products by price, lowest first, and print them,
5. quit.

The menu also ends when input runs out.

### What it does not do

Changes made in the menu live only in memory: there is no option to save the
catalogue, and the file it was loaded from is never written.

## Using it as a library

```python
from prodcat.products import Catalog, Product, format_product, format_table, load_products

catalog = Catalog(load_products("produtos.txt"))
catalog.add(Product(code=103, name="Farinha", price=6.25, quantity=8))
print(format_product(catalog.find(103)))
catalog.sort_by_price()
print(format_table(catalog))
```

`prodcat.products` provides:

- `Product`: a dataclass with `code`, `name`, `price` and `quantity`.
- `parse_products(lines, limit=200)` and `load_products(path, limit=200)`:
  read records in the format above; `load_products` raises `OSError` if the
  file cannot be opened.
- `Catalog(products=[], capacity=200)`: supports `len()` and iteration, and
  has `is_full`, `add(product)`, `find(code)` (the product or `None`) and
  `sort_by_price()`. `add` truncates the name to 63 characters and returns
  the stored product; it raises `DuplicateCodeError` when the code is taken
  and `CatalogFullError` when the catalogue is at capacity.
- `format_table(products)` and `format_product(product)`: the text the menu
  prints.

`prodcat.cli.run(catalog, stdin=None, stdout=None)` runs the menu loop on any
pair of text streams; `prodcat.cli.main(argv=None)` is the command.

## Other helpers

- `prodcat.search`: `sequential_search(values, target)` returns the index of
  the first equal element; `binary_search(values, target)` searches an
  ascending sequence. Both return `None` when the target is absent.
- `prodcat.sorting`: `bubble_sort`, `insertion_sort`, `selection_sort` and
  `exchange_sort`, each returning a new ascending list.
- `prodcat.matrices`: `add`, `transpose`, `multiply`, `total`,
  `find_positions(m, value)` (every `(row, column)` in row-major order) and
  `scale(m, factor=2)`, for matrices given as lists of rows. Ragged rows or
  mismatched shapes raise `ValueError`.
- `prodcat.mathseq`: `factorial`, `factorial_recursive`, `fibonacci` and
  `fibonacci_recursive` (with `fibonacci(0) == 0`); negative arguments raise
  `ValueError`.
- `prodcat.stats`: `mean`, `count_above(values, threshold)`,
  `above_mean(values)` (pairs of index and value) and
  `minimum_position(values)` (the smallest value and the index of its first
  occurrence); `mean`, `above_mean` and `minimum_position` raise `ValueError`
  for an empty sequence.
- `prodcat.climate`: `Reading` (`day`, `city`, `temperature`),
  `parse_readings(lines)` for whitespace-separated `<day> <city>
  <temperature>` records (a malformed or incomplete record, or a city name
  longer than 31 characters, raises `ValueError`), and
  `format_report(readings)`, one line per reading followed by the mean
  temperature, or an empty string when there are no readings.
- `prodcat.geometry`: the frozen dataclass `Point(x, y)` and
  `distance(p1, p2)`, the Euclidean distance.