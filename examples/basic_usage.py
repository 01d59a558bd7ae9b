#!/usr/bin/env python
"""Basic usage examples for the GitHub Manager library.

Lists recent workflow runs of a public repository, then drills into the
jobs of the newest one. A token (GITHUB_TOKEN) raises the rate limit but
is not required for public data.

Run: python examples/basic_usage.py
"""

from github_manager import GitHubClient, ReturnFormat


def main() -> None:
    """Demonstrate common Actions API operations."""
    client = GitHubClient()

    print("=" * 50)
    print("GitHub Manager - Basic Usage Examples")
    print("=" * 50)

    # --- Workflow runs ---
    print("\nListing workflow runs...")
    runs = client.workflow_runs.list_repository_workflow_runs("python", "cpython", per_page=5)
    if not runs.ok:
        print(f"  Failed: {runs.error.kind.value} - {runs.error.message}")
        client.close()
        return

    print(f"  {runs.value.total_count:,} runs in total")
    for run in runs.value.workflow_runs:
        print(f"  - #{run.run_number} {run.name}: {run.status} ({run.conclusion})")

    # --- Jobs of the newest run ---
    if runs.value.workflow_runs:
        newest = runs.value.workflow_runs[0]
        print(f"\nJobs of run {newest.id}...")
        jobs = client.workflow_jobs.list_workflow_run_jobs("python", "cpython", newest)
        for job in jobs.value.jobs if jobs.ok else []:
            seconds = (job.completed_at_timestamp - job.started_at_timestamp) / 1000
            print(f"  - {job.name}: {job.conclusion} in {seconds:.0f}s")

    # --- Raw JSON instead of records ---
    print("\nFetching workflows as raw JSON...")
    workflows = client.workflows.list_workflows("python", "cpython", format=ReturnFormat.JSON)
    if workflows.ok:
        print(f"  Keys: {sorted(workflows.value)}")

    client.close()

    print("\nDone!")


if __name__ == "__main__":
    main()
