"""
LCS Engine - Longest common subsequence over two line sequences
"""

from __future__ import annotations

from models.diff import Match


def compute_lcs(left: list[str], right: list[str]) -> list[Match]:
    """
    Compute the longest common subsequence of two line sequences.

    Lines are compared by exact string equality. When several subsequences
    of maximum length exist, backtracking prefers to leave the left line
    unmatched first: a left line is skipped whenever dropping it does not
    shorten the subsequence, so duplicated lines align to their earliest
    partner ("a\\na" vs "a" keeps left line 1, not line 2).

    Returns matches in ascending order of both indices.
    """
    m = len(left)
    n = len(right)
    dp = [[0] * (n + 1) for _ in range(m + 1)]

    # Build DP table
    for i in range(1, m + 1):
        row = dp[i]
        prev_row = dp[i - 1]
        left_line = left[i - 1]
        for j in range(1, n + 1):
            if left_line == right[j - 1]:
                row[j] = prev_row[j - 1] + 1
            else:
                row[j] = max(prev_row[j], row[j - 1])

    # Backtrack from the bottom-right corner
    matches: list[Match] = []
    i, j = m, n
    while i > 0 and j > 0:
        # Checked before equality so "a\na" vs "a" keeps left line 1, not line 2
        if dp[i - 1][j] == dp[i][j]:
            i -= 1
        elif left[i - 1] == right[j - 1]:
            matches.append(Match(i - 1, j - 1))
            i -= 1
            j -= 1
        else:
            j -= 1

    matches.reverse()
    return matches
