"""Output formats for extracted styles.

These are string templates only; no CSS is interpreted here.
"""

from __future__ import annotations

from typing import Callable

from design_copier.errors import InvalidArgumentError, UnsupportedTargetError

STYLED_IMPORT = "import styled from 'styled-components';"


def to_css(styles: str) -> str:
    return styles


def to_styled_components(styles: str) -> str:
    """Prefix *styles* with the styled-components import, each line trimmed."""
    lines = "\n".join(line.strip() for line in styles.split("\n"))
    return f"{STYLED_IMPORT}\n\n{lines}"


def _kebab(name: str) -> str:
    out = []
    for i, ch in enumerate(name):
        if ch.isupper() and i:
            out.append("-")
        out.append(ch.lower())
    return "".join(out).replace("_", "-")


def _react(styles: str, name: str) -> str:
    return f"""
import React from 'react';
import styled from 'styled-components';

const Styled{name} = styled.div`
  {styles}
`;

export const {name} = () => {{
  return (
    <Styled{name}>
      {{/* Add your content here */}}
    </Styled{name}>
  );
}};
"""


def _vue(styles: str, name: str) -> str:
    css_class = _kebab(name)
    return f"""
<template>
  <div class="{css_class}">
    <!-- Add your content here -->
  </div>
</template>

<script>
export default {{
  name: '{name}',
}};
</script>

<style scoped>
.{css_class} {{
  {styles}
}}
</style>
"""


def _svelte(styles: str, name: str) -> str:
    css_class = _kebab(name)
    return f"""
<!-- {name}.svelte -->
<div class="{css_class}">
  <!-- Add your content here -->
</div>

<style>
  .{css_class} {{
    {styles}
  }}
</style>
"""


def _angular(styles: str, name: str) -> str:
    selector = f"app-{_kebab(name)}"
    return f"""
import {{ Component }} from '@angular/core';

@Component({{
  selector: '{selector}',
  template: `
    <div class="{_kebab(name)}">
      <!-- Add your content here -->
    </div>
  `,
  styles: [`
    .{_kebab(name)} {{
      {styles}
    }}
  `],
}})
export class {name}Component {{}}
"""


FRAMEWORK_TEMPLATES: dict[str, Callable[[str, str], str]] = {
    "react": _react,
    "vue": _vue,
    "svelte": _svelte,
    "angular": _angular,
}


def to_framework_component(styles: str, target: str, component_name: str) -> str:
    """Wrap *styles* in a minimal component for *target*.

    Raises :class:`UnsupportedTargetError` for an unknown framework and
    :class:`InvalidArgumentError` when *component_name* is not an identifier.
    """
    template = FRAMEWORK_TEMPLATES.get(target)
    if template is None:
        raise UnsupportedTargetError(f"Unsupported framework: {target}")
    if not component_name.isidentifier():
        raise InvalidArgumentError(f"Invalid component name: {component_name!r}")
    return template(styles, component_name)
