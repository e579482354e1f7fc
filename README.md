# askflow

Ask a series of questions on the terminal and collect the answers in a dictionary.

askflow has three kinds of question:

- **text** (`TextQuestion`): free input, checked against regular-expression
  validators. When a validator fails, its message is shown and the question is
  asked again.
- **boolean** (`BooleanQuestion`): a `(y/n)` question. `y`/`Y` gives `"true"`,
  `n`/`N` gives `"false"`. Any other input asks again.
- **select** (`SelectQuestion`): pick one option with the Up/Down arrow keys and
  Enter. The selection wraps around at both ends. The answer is the option's key.

Any question can have a `when` condition. The question is asked only if the
condition holds for the answers given so far.

## Installation

```
pip install askflow
```

askflow uses only the standard library.

## Usage

```python
from askflow.inquirer import Inquirer
from askflow.questions import Question, QuestionType
from askflow import callbacks, validators

inquirer = Inquirer()
inquirer.add(
    Question.builder()
    .name("project_name")
    .label("What is the name of your project")
    .type(QuestionType.TEXT)
    .validators([validators.required(), validators.lowercase()])
    .build()
).add(
    Question.builder()
    .name("license")
    .label("Choose a license")
    .type(QuestionType.SELECT)
    .options([("mit", "MIT"), ("gpl", "GPL"), ("unlicense", "UNLICENSE")])
    .build()
).add(
    Question.builder()
    .name("confirm_gpl")
    .label("Are u sure to use gpl")
    .type(QuestionType.BOOLEAN)
    .when(callbacks.is_one_of("license", ["gpl", "unlicense"]))
    .build()
)

answers = inquirer.prompt()
for name, answer in answers.items():
    print(name, "->", answer)
```

`QuestionBuilder.build()` raises `ValueError` when a question has no name or no
label, or when a select question has no options. `make_question(name, label,
type, options, validators, when)` creates a question directly. A
`SelectQuestion` with no options also raises `ValueError`.

Every answer is a string. Use the helpers in `askflow.evaluate` to convert one:

- `as_boolean` accepts only `"true"` and `"false"`.
- `as_int` parses a base-10 integer and narrows it to 32 bits. Leading
  whitespace and a sign are allowed.
- `as_float` parses a single-precision float. It rejects values outside the
  single-precision range.

Each one raises `ValueError` when the string does not have that form. `as_int`
and `as_float` return `0` and `0.0` for an empty string.

### One-off questions

```python
from askflow.questions import ask_text, ask_boolean, ask_select

name = ask_text("Your name")
sure = ask_boolean("Continue")
colour = ask_select("Pick a colour", [("r", "Red"), ("g", "Green")])
```

### Validators

`askflow.validators` provides `required`, `optional`, `min_length`,
`max_length`, `number`, `floating`, `lowercase`, `uppercase` and `email`. Each
one returns a `Validator` with a default message. Use
`make(pattern, message, skip_next_if_match)` to write a validator of your own.

The input must match the whole pattern. The validators run in order, and the
first one that fails supplies the error message. `find_failure(validators, text)`
returns that validator, or `None` when the input passes.

`optional()` accepts blank input and stops checking there, so an empty answer
passes. A non-empty answer must still pass the validators that follow.

### Conditions

`askflow.callbacks` provides `is_true`, `is_false`, `is_empty`, `is_not_empty`,
`is_equal`, `is_not_equal`, `is_one_of` and `is_none_of`. Each one takes the
name of an earlier question and returns a function of the answers. If that
question was not answered, `is_false`, `is_empty`, `is_not_equal` and
`is_none_of` hold, and the others do not.

### Input and output

Every `prompt` method and `ask_*` function takes an optional
`askflow.terminal.Terminal`. By default it uses `sys.stdin` and `sys.stdout`.
You can pass other streams, for example `Terminal(io.StringIO("y\n"),
io.StringIO())`, to script the answers. When the input is an interactive
terminal, select questions read single key presses without echo. Otherwise they
read characters from the stream, and arrows are the escape sequences `ESC [ A`
and `ESC [ B`. `Terminal.read_line` and `Terminal.read_key` raise `EOFError`
when the input ends.

Prompts are coloured with the ANSI sequences in `askflow.color.Color`.

## Demo

```
askflow-demo
```

The demo asks for a project name and a licence. It asks for confirmation when
the licence is GPL or UNLICENSE. It then prints the collected answers, sorted by
name.

## Limitations

askflow does not provide:

- default answers
- multi-select or password questions
- filtering options by typing in select questions