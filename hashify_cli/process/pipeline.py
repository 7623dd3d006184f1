# Path: hashify_cli/process/pipeline.py
"""
Pipeline Orchestrator

Runs the five script stages once per resolved algorithm, strictly in
sequence:

    input -> input-finalizer -> compute -> output-finalizer -> output

Every algorithm re-evaluates all five stages. The first failure aborts
the whole batch; nothing runs for the remaining algorithms.

Per-algorithm bindings (Input, the digest members, Result, Algorithm)
are scoped and reset after each algorithm, including on failure.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional

from hashify_cli.constants import (
    ALGORITHM_VARIABLE,
    DEFAULT_INPUT_FINALIZER,
    DEFAULT_OUTPUT_FINALIZER,
    DEFAULT_OUTPUT_SCRIPT,
    INPUT_VARIABLE,
    RESULT_VARIABLE,
)
from hashify_cli.core.errors import (
    ArgumentError,
    ComputeError,
    HashifyError,
    ScriptRuntimeError,
)
from hashify_cli.core.logger import get_process_logger
from hashify_cli.process.matcher import ConfigMatcher
from hashify_cli.process.resolver import FunctionVariable
from hashify_cli.process.scripting.binding import bind_surface
from hashify_cli.process.scripting.runtime import ScriptRuntime
from hashify_cli.registry import AlgorithmRegistry, DigestValue


logger = get_process_logger('pipeline')


# =============================================================================
# STAGES AND STATES
# =============================================================================

class PipelineStage(str, Enum):
    """Script stages, named as they appear in error messages."""
    INPUT = 'input'
    INPUT_FINALIZER = 'input-finalizer'
    COMPUTE = 'compute'
    OUTPUT_FINALIZER = 'output-finalizer'
    OUTPUT = 'output'


class PipelineState(str, Enum):
    """Progress of one algorithm through the pipeline."""
    IDLE = 'idle'
    INPUT_EVALUATED = 'input_evaluated'
    INPUT_FINALIZED = 'input_finalized'
    COMPUTED = 'computed'
    OUTPUT_FINALIZED = 'output_finalized'
    OUTPUT_EMITTED = 'output_emitted'
    ABORTED = 'aborted'


@dataclass
class PipelineScripts:
    """The four user scripts plus defaults."""
    input: str
    input_finalizer: str = DEFAULT_INPUT_FINALIZER
    output_finalizer: str = DEFAULT_OUTPUT_FINALIZER
    output: str = DEFAULT_OUTPUT_SCRIPT

    def __post_init__(self):
        for stage, source in (
            (PipelineStage.INPUT, self.input),
            (PipelineStage.INPUT_FINALIZER, self.input_finalizer),
            (PipelineStage.OUTPUT_FINALIZER, self.output_finalizer),
            (PipelineStage.OUTPUT, self.output),
        ):
            if not source or not source.strip():
                raise ArgumentError(f"The {stage.value} script must not be empty")


@dataclass
class PipelineContext:
    """Transient state of one algorithm's run."""
    variable: FunctionVariable
    state: PipelineState = PipelineState.IDLE
    raw_input: Any = None
    finalized_input: Optional[bytes] = None
    digest: Optional[DigestValue] = None
    finalized_output: Any = None
    history: list[PipelineState] = field(default_factory=list)

    def advance(self, state: PipelineState) -> None:
        self.history.append(self.state)
        self.state = state


# =============================================================================
# ORCHESTRATOR
# =============================================================================

class PipelineOrchestrator:
    """
    Drives the pipeline over a batch of algorithms.

    Example:
        with ScriptRuntime() as runtime:
            install_helpers(runtime)
            orchestrator = PipelineOrchestrator(registry, runtime, matcher, scripts)
            orchestrator.run(resolve_query('CRC:CRC32', registry))
    """

    def __init__(
        self,
        registry: AlgorithmRegistry,
        runtime: ScriptRuntime,
        matcher: ConfigMatcher,
        scripts: PipelineScripts
    ):
        self.registry = registry
        self.runtime = runtime
        self.matcher = matcher
        self.scripts = scripts

    def run(self, variables: Iterable[FunctionVariable]) -> list[PipelineContext]:
        """
        Run every algorithm in order.

        Args:
            variables: Resolved algorithm instances

        Returns:
            Completed contexts, one per algorithm

        Raises:
            HashifyError: From the first failing stage; remaining
                algorithms are not run
        """
        completed = []
        for variable in variables:
            completed.append(self.run_one(variable))
        logger.debug(f"Pipeline finished for {len(completed)} algorithms")
        return completed

    def run_one(self, variable: FunctionVariable) -> PipelineContext:
        """
        Run the five stages for one algorithm.

        Raises:
            HashifyError: From the failing stage
        """
        context = PipelineContext(variable)
        logger.debug(f"Running pipeline for '{variable}'")

        try:
            self._evaluate_input(context)
            self._finalize_input(context)
            self._compute(context)
            self._finalize_output(context)
            self._emit_output(context)
        except HashifyError:
            context.advance(PipelineState.ABORTED)
            raise
        finally:
            self.runtime.reset_bindings()

        return context

    # =========================================================================
    # STAGES
    # =========================================================================

    def _evaluate_input(self, context: PipelineContext) -> None:
        values = self.runtime.evaluate(self.scripts.input, PipelineStage.INPUT.value)
        context.raw_input = self._single(values, PipelineStage.INPUT)
        context.advance(PipelineState.INPUT_EVALUATED)

    def _finalize_input(self, context: PipelineContext) -> None:
        stage = PipelineStage.INPUT_FINALIZER
        self.runtime.bind(INPUT_VARIABLE, context.raw_input)
        values = self.runtime.evaluate(self.scripts.input_finalizer, stage.value)
        value = self._single(values, stage)

        if not isinstance(value, (bytes, bytearray)):
            raise ScriptRuntimeError(
                stage.value,
                f"expected a byte sequence, got {type(value).__name__}"
            )

        context.finalized_input = bytes(value)
        context.advance(PipelineState.INPUT_FINALIZED)

    def _compute(self, context: PipelineContext) -> None:
        variable = context.variable
        match = self.matcher.match(variable)
        algorithm = self.registry.algorithm(variable.descriptor)
        logger.debug(f"'{variable}' computes with {match.source.value} configuration")

        try:
            context.digest = algorithm.compute(context.finalized_input, match.config)
        except Exception as e:
            raise ComputeError(variable.qualified_name, str(e)) from e

        context.advance(PipelineState.COMPUTED)

    def _finalize_output(self, context: PipelineContext) -> None:
        stage = PipelineStage.OUTPUT_FINALIZER
        bind_surface(self.runtime, context.digest)
        values = self.runtime.evaluate(self.scripts.output_finalizer, stage.value)
        context.finalized_output = self._single(values, stage)
        context.advance(PipelineState.OUTPUT_FINALIZED)

    def _emit_output(self, context: PipelineContext) -> None:
        self.runtime.bind(RESULT_VARIABLE, context.finalized_output)
        self.runtime.bind(ALGORITHM_VARIABLE, context.variable.descriptor.name)
        self.runtime.evaluate(self.scripts.output, PipelineStage.OUTPUT.value)
        context.advance(PipelineState.OUTPUT_EMITTED)

    @staticmethod
    def _single(values: list[Any], stage: PipelineStage) -> Any:
        if len(values) != 1:
            raise ScriptRuntimeError(
                stage.value, f"expected exactly one value, got {len(values)}"
            )
        return values[0]
