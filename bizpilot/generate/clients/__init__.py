# Model clients share one interface: generate(messages, params) -> (text, meta).
