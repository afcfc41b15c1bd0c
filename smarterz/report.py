from collections import Counter


def build_report(batch_name, items, completed):
    """Plain-text completion summary for one aggregated batch."""
    if not items:
        return f"No content found for {batch_name}."

    done_ids = set(completed)
    done = [i for i in items if i.get("id") in done_ids]
    pending = [i for i in items if i.get("id") not in done_ids]

    total_by_subject = Counter(i["_subjectName"] for i in items)
    done_by_subject = Counter(i["_subjectName"] for i in done)
    pending_by_type = Counter(i["_type"] for i in pending)

    pct = round(100 * len(done) / len(items))
    msg = f"PROGRESS: {batch_name}\n\n"
    msg += f"Items: {len(items)} | Done: {len(done)} | Pending: {len(pending)} ({pct}% complete)\n\n"

    msg += "By subject:\n"
    for subject, total in total_by_subject.items():
        msg += f"  • {subject}: {done_by_subject[subject]}/{total}\n"

    if pending_by_type:
        msg += "\nStill pending:\n"
        for content_type, count in pending_by_type.most_common():
            msg += f"  • {content_type}: {count}\n"

    if pending:
        nxt = pending[0]
        msg += f"\nUp next: [{nxt['_subjectName']} / {nxt['_type']}] {nxt.get('title') or nxt.get('name')}"
    else:
        msg += "\nAll done."
    return msg
