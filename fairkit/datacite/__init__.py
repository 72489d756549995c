"""DataCite kernel-4 model, vocabulary and mapping from core records."""