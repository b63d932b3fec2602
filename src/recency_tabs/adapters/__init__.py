"""Host-specific front ends for the tab strip."""
