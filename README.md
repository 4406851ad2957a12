# corazones

A small toolkit for a heart-disease dataset stored as CSV. It reads the file
and sorts each patient's measurements into categories, such as age group,
chest-pain type or thallasemia. From those categories it reports the entropy
of the diagnosis outcome, and an information measure for some attributes.

## Installation

```
pip install .
```

The package needs nothing outside the standard library. To run the tests as
well:

```
pip install ".[test]"
pytest
```

## Command line

```
corazones [PATH]
```

The command loads the dataset at `PATH` and prints the entropy of the outcome
column. If you leave out `PATH`, it reads `Datasets/heart.csv` from the current
directory. The output has this form:

```
The entropy of the loaded DataSet is: <value>
```

If the file cannot be read, or a row holds a value that is not an integer, the
command prints a message to standard error and exits with status 1.

## Library use

### Reading and writing CSV

```python
from corazones.csvdata import read_csv, write_csv

rows = read_csv("Datasets/heart.csv")   # list of lists of strings
write_csv("copy.csv", rows)             # every field is quoted
```

`read_csv` handles quoted fields, commas inside quotes and doubled quotes
(`""`). It skips blank lines and drops an empty field at the end of a line.
`write_csv` wraps every field in double quotes and doubles any quote inside a
field. Both raise `OSError` when the file cannot be opened.

### Working with the dataset

```python
from corazones.heart import HeartDataSet, Fields

dataset = HeartDataSet.load("Datasets/heart.csv")
print(dataset.entropy())
print(dataset.information_gain(Fields.AGE))
```

- `HeartDataSet.load(path)` reads a CSV file. `path` defaults to
  `HeartDataSet.DEFAULT_PATH`, which is `"Datasets/heart.csv"`.
- `HeartDataSet.from_rows(rows)` builds a dataset from rows you already have.
  The first row (the header) and the last row are not parsed. Each of them
  yields a `HeartRecord` with every category at its default.
- `HeartRecord.from_row(row)` turns the first twelve fields of a row into a
  categorised record. It raises `ValueError` if the row has fewer than twelve
  fields or a field does not start with an integer.
- `HeartDataSet.records` is the list of records.
- `HeartDataSet.entropy()` returns the Shannon entropy, in bits, of the
  `output` column.
- `HeartDataSet.information_gain(field)` accepts `Fields.AGE`, `Fields.SEX` and
  `Fields.CHEST_PAIN`. It returns a value computed from the entropy and the
  proportions of each category. Any other field raises `ValueError`.

The categories are enumerations: `Age`, `Sex`, `ChestPain`,
`RestingBloodPressure`, `Cholestoral`, `FastingBloodSugar`, `MaxHeartRate`,
`PreviousPeak`, `Slope`, `Thallasemia` and `Output`. `Fields` names the
attributes of a record.

## What it does not do

The package computes entropy measures only. It does not build or apply a
decision tree, and it has no graphical display.