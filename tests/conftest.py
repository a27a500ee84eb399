"""Pytest configuration and fixtures."""

import logging
from pathlib import Path

import pytest

from buildassert.config import reset_settings
from tests.fakes import (
    CompileTask,
    FakeConfiguration,
    FakeProject,
    FakeReportingTask,
    FakeTask,
    FakeTaskInputs,
    FakeTaskOutputs,
    JavaExtension,
)


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Reset settings and drop buildassert loggers after each test to prevent handler leaks."""
    yield

    reset_settings()

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("buildassert_")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Project directory with a source file and a build output directory."""
    root = tmp_path / "project"
    (root / "src" / "main").mkdir(parents=True)
    (root / "src" / "main" / "App.java").write_text("class App {}")
    (root / "build" / "libs").mkdir(parents=True)
    (root / "build" / "libs" / "app.jar").write_text("jar")
    return root


@pytest.fixture
def compile_task(project_dir: Path) -> CompileTask:
    return CompileTask(
        "compile",
        project_path=":app",
        description="Compiles the sources",
        group="build",
        depends_on=["processResources"],
        inputs=FakeTaskInputs([project_dir / "src" / "main" / "App.java"]),
        outputs=FakeTaskOutputs([project_dir / "build" / "classes"]),
        properties={"release": 17},
    )


@pytest.fixture
def project(project_dir: Path, compile_task: CompileTask) -> FakeProject:
    return FakeProject(
        "app",
        project_dir,
        extensions={"java": JavaExtension()},
        configurations=[FakeConfiguration("implementation"), FakeConfiguration("runtimeClasspath")],
        plugins=["java", "org.example.lint"],
        tasks=[compile_task, FakeTask("clean"), FakeReportingTask("check")],
        properties={"version": "1.0.0", "group": "org.example"},
    )
