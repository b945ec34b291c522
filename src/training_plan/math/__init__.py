"""Pure scheduling math for training plans."""
