"""High level code for turning a targets file into vtfp json files.

This structures processing of each targets line into the following modules:

  - targets.py: Parse a targets line into a record with a sample id.
  - dirs.py: Resolve and check input, output, staging and json directories.
  - vtfp.py: Assemble the vtfp command for the selected method.
  - main.py: Run the commands and summarize the batch.
"""
