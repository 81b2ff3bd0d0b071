# alpinetransform

Building blocks for turning a parsed template tree (elements, text with
`{expression}` placeholders, conditionals, loops, components and a fence
section of declarations) into a plain node tree driven by Alpine.js
directives.

## Installation

```
pip install .
```

## Modules

### `alpinetransform.nodes`

Dataclasses for the template tree: `Node` (the base class), `Element`,
`Attribute`, `TextNode`, `ExpressionNode`, `Conditional`, `Loop`,
`ComponentNode` with `ComponentProp`, `FenceSection` with `FenceVariable` and
`FenceProp`, `Template`, and the markers `ElseNode`, `ElseIfNode`, `IfEndNode`
and `ForEndNode`.

### `alpinetransform.expressions`

- `transform_text_with_expressions(text, data_scope)` splits text into
  `TextNode`s and `<span x-text="...">` elements for `{expr}` and
  `{{ expr }}`. Braces that do not hold an expression (for example a quoted
  string) are kept as text.
- `extract_variables_from_expr(expr, data_scope)` adds every variable an
  expression refers to into the scope, through ternaries, logical, comparison
  and arithmetic operators, calls and property access. Unknown names get the
  value of `default_value_for_var(name)`, which is `None` for names it does
  not know.
- `is_expression_syntax`, `is_valid_identifier`, `is_string_literal`,
  `is_numeric_string`, `is_js_reserved_keyword` classify text.
- `transform_expression("user.name")` returns `"(user || {}).name"`.

```python
from alpinetransform.expressions import transform_text_with_expressions

scope = {}
nodes = transform_text_with_expressions("Hello {name}", scope)
# [TextNode(content='Hello '), Element(tag_name='span', attributes=[x-text="name"], ...)]
# scope == {"name": None}
```

### `alpinetransform.scope`

`init_data_scope`, `create_child_scope` and `merge_scopes` copy and combine
scopes (merging never overwrites a name the parent already has).
`find_fence_section(nodes)` returns the first `FenceSection`, and
`collect_fence_data(fence, data_scope)` adds its variables, its props'
defaults (only where the scope lacks them) and the names its raw content
refers to. Numeric fence values are kept as text.

### `alpinetransform.jsdata`

- `alpine_data_formatter(data_scope)` renders a scope as the value of an
  `x-data` attribute, e.g. `{"title": "Hi"}` becomes `{"title": 'Hi'}`.
  Certain fixed combinations of keys produce fixed literals, and when two or
  more of `count`, `name`, `items`, `user`, `increment`, `showReset` are present
  (`is_test_environment`) strings and keys are quoted with `&quot;`.
- `format_value_to_js(value, in_test_environment)` renders values with sorted
  object keys; strings that look like functions (`is_function_expression`)
  are written as they are.
- `ensure_critical_variables`, `default_value_for_key` and
  `initialize_default_data_scope` supply default values.
- `parse_simple_object` and `parse_simple_array` naively parse flat literals.

### `alpinetransform.jsutils`

- `any_to_js_value({"a": [1, "x"]})` returns `{a: [1, "x"]}`; keys that are
  not identifiers are quoted.
- `decl_props({"count": 3})` returns `"let count = 3;\n"`.
- `make_getter(comp_data)` builds `{get name() { return expr },...}`.
- `generate_random()`, `is_bool_and_true`, `any_to_slice`,
  `is_js_object_literal`, `is_js_array_literal`, `is_js_function_literal`.

### `alpinetransform.whitespace`

`preserve_whitespace(nodes)` collapses inner whitespace runs in text nodes,
drops blank text at the edges of a list, and recurses into elements.
`process_whitespace` and `is_only_whitespace` are the pieces it uses.

### `alpinetransform.nesting`

`ensure_proper_nesting(nodes)` moves non-blank content that follows an
`x-if`/`x-else-if`/`x-else`/`x-for` template into that template.
`fix_nested_loops(nodes)` rewrites `item in items` loops nested under a
`category in categories` loop to `item in category.items`.

## What this package does not do

There is no single entry point that transforms a whole `Template`: turning
`Conditional`, `Loop` and `ComponentNode` nodes into `<template x-if>`,
`<template x-for>` and component elements, registering component templates,
and wrapping the result in an `x-data` element are not provided. The modules
above are the pieces such a transformation is built from. There is also no
command-line program.

## Running the tests

```
pip install .[test]
pytest
```