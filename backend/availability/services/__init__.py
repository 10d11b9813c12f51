"""Services Layer — orchestrates core rules around repository IO.

Invariants:
    - Services never touch SQL directly; all IO goes through InstanceRepository
    - Each operation is straight-line: no retry, no background work

Design Decisions:
    - Functional core / imperative shell: core/ decides, services/ sequences IO
"""
