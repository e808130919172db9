"""Provisioning flow: load, parse, apply, patch."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from gitfit.aliases import AliasRecord, collect_aliases
from gitfit.config import Settings
from gitfit.console import Renderer
from gitfit.errors import ConfigurationError, NoAliasesError
from gitfit.git_config import GitConfig
from gitfit.profile import default_profile_path, detect_shell, patch_profile, shell_for_profile
from gitfit.source import load_alias_source


@dataclass
class ProvisionReport:
    """Outcome of one provisioning run."""

    aliases: list[AliasRecord] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    profile_path: Path | None = None
    profile_changed: bool = False
    dry_run: bool = False


def resolve_profile_path(settings: Settings) -> Path:
    if settings.profile_path is not None:
        return settings.profile_path.expanduser()
    return default_profile_path(detect_shell())


class Provisioner:
    """Apply a shared alias file to the global Git configuration."""

    def __init__(
        self,
        settings: Settings,
        *,
        git: GitConfig | None = None,
        renderer: Renderer | None = None,
    ) -> None:
        self.settings = settings
        self.git = git or GitConfig(settings.git_executable)
        self.renderer = renderer or Renderer()

    def load(self) -> tuple[list[AliasRecord], list[str]]:
        """Load and parse the configured source."""
        if not self.settings.source:
            raise ConfigurationError("no alias source configured; pass --source or set GITFIT_SOURCE")
        content = load_alias_source(self.settings.source, timeout=self.settings.timeout_seconds)
        result = collect_aliases(content)
        logger.info(
            "provision.parsed source={} aliases={} skipped={}",
            self.settings.source,
            len(result.records),
            len(result.skipped),
        )
        self.renderer.skipped(result.skipped)
        if not result.records:
            raise NoAliasesError(f"no aliases found in {self.settings.source}")
        return list(result.records), list(result.skipped)

    def run(self, *, dry_run: bool = False, customize_prompt: bool | None = None) -> ProvisionReport:
        if not dry_run:
            self.git.ensure_available()

        records, skipped = self.load()
        report = ProvisionReport(skipped=skipped, dry_run=dry_run)
        report.aliases = self.git.apply_aliases(records, dry_run=dry_run)
        self.renderer.alias_table(report.aliases)
        verb = "Would install" if dry_run else "Installed"
        self.renderer.success(f"{verb} {len(report.aliases)} git aliases")

        patch_prompt = self.settings.customize_prompt if customize_prompt is None else customize_prompt
        if patch_prompt:
            report.profile_path = resolve_profile_path(self.settings)
            if dry_run:
                self.renderer.info(f"Would patch prompt in {report.profile_path}")
            else:
                report.profile_changed = self.patch_prompt(report.profile_path)
        return report

    def patch_prompt(self, path: Path) -> bool:
        changed = patch_profile(path, shell=shell_for_profile(path))
        if changed:
            self.renderer.success(f"Prompt updated in {path}; open a new shell to see it")
        else:
            self.renderer.info(f"Prompt already configured in {path}")
        return changed
