"""
Analysis Scripts

Reporting scripts built on top of the order_analytics package.

Usage:
    cd backend
    python -m scripts.analysis.order_report
"""
