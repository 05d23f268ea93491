"""
Downtime transition analysis — pure, synchronous stages.

Modules:
  grouping         : GroupingDimension enum + node label normalisation.
  sequence_builder : Events DataFrame → one ordered node sequence per line.
  aggregator       : Consecutive-pair counting pooled across lines.
  ranker           : Deterministic ordering + top-N truncation into "other".
  matrix           : Top-N from × to relationship matrix.
  assembler        : Percentages, summary stats, JSON-ready result.
  analysis         : Runs the stages above for one filter set.

None of these modules perform I/O; fetching lives in
``millops.services.data`` and orchestration in
``millops.services.orchestrator``.
"""
