"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``dappgen/scaffolder/templates/`` directory and writes the rendered output
through a ``FileSystem`` port.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from dappgen.fs import FileSystem, LocalFileSystem


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    Templates are ``.j2`` files under the template directory; their output
    name is the template path with the ``.j2`` suffix removed.  Missing
    context variables are an error rather than an empty string.
    """

    def __init__(
        self,
        fs: FileSystem | None = None,
        template_dir: str | Path | None = None,
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.fs = fs or LocalFileSystem()
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"scripts/android.ts.j2"``).
            context: Dictionary of variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        The parent directory must already exist.  Returns the output path.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        self.fs.write_text(out, content)
        return out

    def render_tree(
        self,
        template_prefix: str,
        output_dir: str | Path,
        context: dict[str, Any],
    ) -> list[Path]:
        """Render every ``*.j2`` file under *template_prefix* into *output_dir*.

        A template at ``scripts/web.ts.j2`` rendered with
        ``template_prefix="scripts"`` and ``output_dir="/tmp/demo/scripts"``
        writes ``/tmp/demo/scripts/web.ts``.

        Returns:
            List of written file paths, in template name order.
        """
        out_base = Path(output_dir)
        written: list[Path] = []
        for template_key in self.list_templates(template_prefix):
            rel = Path(template_key).relative_to(template_prefix)
            output_file = out_base / str(rel)[: -len(".j2")]
            written.append(self.render_to_file(template_key, output_file, context))
        return written

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory and use ``/``.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )
