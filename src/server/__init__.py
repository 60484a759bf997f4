"""HTTP service exposing the guideplan compiler."""
