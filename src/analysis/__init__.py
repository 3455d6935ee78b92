"""Post-processing of generated projects: dependencies and BOM versions."""
