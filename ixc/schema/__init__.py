"""Schema descriptions, value types, struct derivation, the native binary codec and state object key and value encoding."""