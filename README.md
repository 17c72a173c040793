# wordreduce

`wordreduce` counts the words in every file of a directory. The work runs in
three stages:

1. **Map** – each line has its ASCII punctuation removed, is lower-cased and
   split on spaces; every word becomes an intermediate record such as
   `word 1`.
2. **Sort** – the intermediate records are grouped by word, one line per word
   followed by a run of `1`s, one for each occurrence (for example `the 111`).
3. **Reduce** – each group is collapsed into `word <count>`.

When the work is split over several mappers and reducers, the partial outputs
are merged and the counts of repeated words are summed into a single final
count per word.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
wordreduce
```

The command prints a banner and asks in turn for the input, temporary and
output directories, then for the number of mappers and reducers. Any of these
can be given as options instead, in which case it is not asked for:

| Option | Meaning |
| --- | --- |
| `--input DIR` | directory holding the input files |
| `--temp DIR` | directory for intermediate files |
| `--output DIR` | directory for the results |
| `--mappers N` | number of map threads |
| `--reducers N` | number of reduce threads |
| `--single` | map everything into one temp file and reduce it once; no counts are asked for |

Each answer is checked as it is given: the input directory must exist and must
not be empty, the other directories must exist, and counts must be positive
whole numbers (a prompted count is asked again until one is entered). Invalid
input, or a run that fails, is reported and the command exits with status 1;
a successful run prints `Successfully Terminated` and exits with status 0.

### Files written

A partitioned run (the default) writes:

- `TEMP_<n>` in the temporary directory for each partition's intermediate
  records,
- `OUTPUT_<n>` in the output directory for each partition's reduced counts,
- `OUTPUT_FINAL.txt` in the output directory with one `word count` line per
  word,
- an empty `SUCCESS.txt` in the output directory once the run has finished.

A `--single` run writes `temp.txt` in the temporary directory and appends the
counts to `output.txt` in the output directory, rewriting `SUCCESS.txt`
(containing `SUCCESS`) beside it.

## Library use

The stages are available on their own:

```python
from wordreduce.mapper import WordMapper, strip_punctuation
from wordreduce.sorter import group_counts, sort_file
from wordreduce.reducer import WordReducer, parse_grouped
from wordreduce.filemgr import read_lines, write_lines

parse_grouped("the 111")   # ("the", 3)
group_counts(["a 1", "b 1", "a 1"])   # Counter({"a": 2, "b": 1})
```

A whole run over one directory, with a single mapper and reducer:

```python
from wordreduce.mapper import WordMapper
from wordreduce.reducer import WordReducer
from wordreduce.workflow import run_single

pairs = run_single("input", "temp", "output", WordMapper(), WordReducer("output"))
```

`run_single` returns the reduced `(word, count)` pairs in the order they were
written.

A partitioned run, where the input files are shared out between several
mappers and reducers, each on its own thread:

```python
from wordreduce.mapper import WordMapper
from wordreduce.reducer import WordReducer
from wordreduce.workflow import Workflow

workflow = Workflow(WordMapper, WordReducer)
counts = workflow.run("input", "temp", "output", mappers=2, reducers=2)
```

`Workflow.run` returns a dictionary of final counts. There are never more
mappers than input files, nor more reducers than mappers, and at most 20
mappers are supported. Input files are split into consecutive groups by
`wordreduce.workflow.partition_files`.

A missing or empty input directory, or too many mappers, raises
`wordreduce.workflow.WorkflowError`; non-positive mapper or reducer counts
raise `ValueError`.

Custom stages can be plugged in by subclassing `wordreduce.mapper.MapBase`
and `wordreduce.reducer.ReduceBase`.

## Limitations

All work runs on threads inside one process. There is no way to send map or
reduce work to other processes or machines.