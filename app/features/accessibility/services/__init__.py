"""
Accessibility Services

1. client.py - AnalyzerClient, the HTTP call to the remote analyzer
2. classifier.py - issue code and score lookups
3. transformer.py - raw analyzer payload -> AnalysisResult
4. orchestrator.py - RequestOrchestrator, lifecycle of one analysis
5. notifier.py - notification sinks
6. report.py - presentation hints on top of an AnalysisResult
"""
