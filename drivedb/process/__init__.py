# Path: drivedb/process/__init__.py
"""
Process Layer for drivedb

The PROCESS layer resolves drives against the rule set:
- resolver/ - Model lookup and preset merge

All components follow the IPO pattern:
- Read from INPUT layer (loaders)
- Process data (lookup, merge)
- Prepare for OUTPUT layer (CLI report)
"""
