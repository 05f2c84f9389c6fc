"""ts_baselines.domain

Pure rules that operate on baseline names and baseline text.

Nothing in here touches the filesystem; callers pass strings in and get plain
values back, which keeps the rules easy to test in isolation.
"""
